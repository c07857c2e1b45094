from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from dynparam.core.evaluation.evaluator import ScriptEvaluator, default_evaluator
from dynparam.core.parameters.base import ParameterDefinitionBase, ParameterDescriptor
from dynparam.core.parameters.choice import ChoiceParameterDefinition
from dynparam.core.parameters.form import ParameterForm
from dynparam.core.parameters.string import StringParameterDefinition
from .registry_base import NameRegistry


class DescriptorRegistry(NameRegistry[ParameterDescriptor]):
    pass


class FormRegistry(NameRegistry[ParameterForm]):
    pass


class RegistryManager(BaseModel):
    """Central manager for parameter descriptors and loaded forms."""

    descriptors: DescriptorRegistry = Field(default_factory=DescriptorRegistry)
    forms: FormRegistry = Field(default_factory=FormRegistry)
    evaluator: Optional[ScriptEvaluator] = None

    model_config = {"arbitrary_types_allowed": True}

    def register_defaults(self) -> None:
        """Register the built-in dynamic parameter kinds."""
        for descriptor in (ChoiceParameterDefinition.DESCRIPTOR, StringParameterDefinition.DESCRIPTOR):
            if descriptor.type_id not in self.descriptors:
                self.descriptors.register(descriptor.type_id, descriptor)

    def get_evaluator(self) -> ScriptEvaluator:
        if self.evaluator is None:
            self.evaluator = default_evaluator()
        return self.evaluator

    def get_parameter(self, form_name: str, parameter_name: str) -> ParameterDefinitionBase:
        return self.forms.get(form_name).get(parameter_name)
