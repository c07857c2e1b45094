from __future__ import annotations

"""Submitted form data as seen by parameter definitions."""

from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, Field

M = TypeVar("M", bound=BaseModel)


class ParameterRequest(BaseModel):
    """Raw query values keyed by parameter name, plus generic JSON binding."""

    parameters: Dict[str, List[str]] = Field(default_factory=dict)

    @classmethod
    def from_pairs(cls, pairs: List[tuple[str, str]]) -> "ParameterRequest":
        parameters: Dict[str, List[str]] = {}
        for key, value in pairs:
            parameters.setdefault(key, []).append(value)
        return cls(parameters=parameters)

    def get_parameter_values(self, name: str) -> Optional[List[str]]:
        """All values submitted under ``name``; ``None`` when nothing was submitted."""
        values = self.parameters.get(name)
        if not values:
            return None
        return list(values)

    def bind_json(self, model: Type[M], payload: Mapping[str, Any]) -> M:
        if not isinstance(payload, Mapping):
            raise TypeError(f"expected a JSON object, got {type(payload).__name__}")
        return model.model_validate(dict(payload))


__all__ = ["ParameterRequest"]
