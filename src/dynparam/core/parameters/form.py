from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from dynparam.core.parameters.base import ParameterDefinitionBase
from dynparam.core.parameters.values import StringParameterValue
from dynparam.core.request import ParameterRequest


class ParameterForm:
    """The ordered parameter definitions of one build trigger form."""

    def __init__(self, name: str, definitions: Iterable[ParameterDefinitionBase] = ()):
        self.name = name
        self.definitions: Dict[str, ParameterDefinitionBase] = {}
        for definition in definitions:
            self.add(definition)

    def add(self, definition: ParameterDefinitionBase) -> None:
        if definition.name in self.definitions:
            raise ValueError(f"Duplicate parameter in form {self.name}: {definition.name}")
        self.definitions[definition.name] = definition

    def get(self, name: str) -> ParameterDefinitionBase:
        if name not in self.definitions:
            available = ", ".join(self.definitions)
            raise KeyError(f"Unknown parameter: {name}. Available: {available}")
        return self.definitions[name]

    def names(self) -> List[str]:
        return list(self.definitions)

    def create_values(self, request: ParameterRequest) -> List[Optional[StringParameterValue]]:
        """Create a value for every parameter of the form, in form order."""
        return [definition.create_value(request) for definition in self.definitions.values()]

    def __len__(self) -> int:
        return len(self.definitions)


__all__ = ["ParameterForm"]
