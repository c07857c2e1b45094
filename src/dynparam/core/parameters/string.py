from __future__ import annotations

from typing import Any, Mapping, Optional

from dynparam.core.parameters.base import ParameterDefinitionBase, ParameterDescriptor
from dynparam.core.parameters.errors import MalformedSubmissionError
from dynparam.core.parameters.values import StringParameterValue
from dynparam.core.request import ParameterRequest


class StringParameterDefinition(ParameterDefinitionBase):
    """Free-text parameter whose default is generated by its script."""

    def create_value_from_json(
        self, request: ParameterRequest, payload: Mapping[str, Any]
    ) -> StringParameterValue:
        return self._bind(request, payload)

    def create_value(self, request: ParameterRequest) -> Optional[StringParameterValue]:
        values = request.get_parameter_values(self.name)
        if values is None:
            return self.get_default_parameter_value()
        if len(values) != 1:
            raise MalformedSubmissionError(self.name, len(values))
        return StringParameterValue(name=self.name, value=values[0], description=self.description)


StringParameterDefinition.DESCRIPTOR = ParameterDescriptor(
    type_id="dynamic_string",
    display_name="Dynamic String Parameter",
    definition_class=StringParameterDefinition,
)


__all__ = ["StringParameterDefinition"]
