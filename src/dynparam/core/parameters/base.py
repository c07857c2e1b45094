from __future__ import annotations

"""Base class shared by script-backed parameter definitions."""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict

from dynparam.core.evaluation.evaluator import (
    ScriptEvaluator,
    default_evaluator,
    is_list_shaped,
    string_form,
)
from dynparam.core.parameters.errors import MalformedSubmissionError
from dynparam.core.parameters.spec import ExecutionTarget, ParameterSpec
from dynparam.core.parameters.values import StringParameterValue
from dynparam.core.request import ParameterRequest


class ParameterDefinitionBase(ABC):
    """A parameter whose value is produced by evaluating ``spec.script``.

    Subclasses decide how submitted values are turned into parameter values;
    evaluation itself is always delegated to the injected evaluator.
    """

    DESCRIPTOR: ClassVar["ParameterDescriptor"]

    def __init__(
        self,
        spec: ParameterSpec,
        *,
        evaluator: ScriptEvaluator | None = None,
        logger: logging.Logger | None = None,
    ):
        self.spec = spec
        self.evaluator = evaluator if evaluator is not None else default_evaluator()
        self.logger = logger or logging.getLogger(type(self).__module__)

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def description(self) -> str:
        return self.spec.description

    @property
    def script(self) -> str:
        return self.spec.script

    @property
    def execution_target(self) -> ExecutionTarget:
        return self.spec.execution_target

    @property
    def uuid(self) -> Optional[str]:
        return self.spec.uuid

    def get_value(self) -> Any:
        """Evaluate the script; ``None`` means it produced nothing."""
        return self.evaluator.evaluate(self.spec)

    def get_default_parameter_value(self) -> Optional[StringParameterValue]:
        value = self.get_value()
        if value is None:
            return None
        if is_list_shaped(value):
            value = value[0] if value else None
        return StringParameterValue(name=self.name, value=string_form(value), description=self.description)

    def _bind(self, request: ParameterRequest, payload: Mapping[str, Any]) -> StringParameterValue:
        try:
            value = request.bind_json(StringParameterValue, payload)
        except (TypeError, ValueError) as exc:
            raise MalformedSubmissionError(self.name, cause=exc) from exc
        value.description = self.description
        return value

    @abstractmethod
    def create_value(self, request: ParameterRequest) -> Optional[StringParameterValue]:
        raise NotImplementedError

    @abstractmethod
    def create_value_from_json(
        self, request: ParameterRequest, payload: Mapping[str, Any]
    ) -> StringParameterValue:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, target={self.execution_target.value})"


class ParameterDescriptor(BaseModel):
    """Registry entry describing a kind of parameter definition."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    type_id: str
    display_name: str
    definition_class: Type[ParameterDefinitionBase]

    def new_instance(
        self,
        spec: ParameterSpec,
        *,
        evaluator: ScriptEvaluator | None = None,
        logger: logging.Logger | None = None,
    ) -> ParameterDefinitionBase:
        return self.definition_class(spec, evaluator=evaluator, logger=logger)


__all__ = ["ParameterDefinitionBase", "ParameterDescriptor"]
