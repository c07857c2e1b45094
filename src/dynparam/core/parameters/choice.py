from __future__ import annotations

from typing import Any, List, Mapping, Optional

from dynparam.core.evaluation.evaluator import is_list_shaped, string_form
from dynparam.core.parameters.base import ParameterDefinitionBase, ParameterDescriptor
from dynparam.core.parameters.errors import InvalidChoiceError, MalformedSubmissionError
from dynparam.core.parameters.values import StringParameterValue
from dynparam.core.request import ParameterRequest


class ChoiceParameterDefinition(ParameterDefinitionBase):
    """Choice parameter whose list of values is generated by its script.

    Choices are recomputed on every call. A script that yields nothing, or
    something other than a list, produces no choices and a warning; nothing
    submitted against such a parameter will validate.
    """

    def get_choices(self) -> List[Any]:
        value = self.get_value()

        if value is None:
            self.logger.warning("Script for parameter '%s' returned nothing", self.name)
            return []

        if not is_list_shaped(value):
            self.logger.warning(
                "Script for parameter '%s' did not return a list (got %s)", self.name, type(value).__name__
            )
            return []

        return list(value)

    def create_value_from_json(
        self, request: ParameterRequest, payload: Mapping[str, Any]
    ) -> StringParameterValue:
        return self.check_value(self._bind(request, payload))

    def create_value(self, request: ParameterRequest) -> Optional[StringParameterValue]:
        values = request.get_parameter_values(self.name)

        if values is None:
            return self.get_default_parameter_value()
        if len(values) == 1:
            return self.check_value(
                StringParameterValue(name=self.name, value=values[0], description=self.description)
            )
        raise MalformedSubmissionError(self.name, len(values))

    def check_value(self, value: StringParameterValue) -> StringParameterValue:
        """Return ``value`` if its string matches one of the current choices."""
        for choice in self.get_choices():
            if choice is None:
                if value.value is None:
                    return value
            elif string_form(choice) == value.value:
                return value
        raise InvalidChoiceError(value.value)


ChoiceParameterDefinition.DESCRIPTOR = ParameterDescriptor(
    type_id="dynamic_choice",
    display_name="Dynamic Choice Parameter",
    definition_class=ChoiceParameterDefinition,
)


__all__ = ["ChoiceParameterDefinition"]
