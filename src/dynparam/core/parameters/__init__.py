from .base import ParameterDefinitionBase, ParameterDescriptor
from .choice import ChoiceParameterDefinition
from .errors import InvalidChoiceError, MalformedSubmissionError, ParameterValueError
from .form import ParameterForm
from .spec import ExecutionTarget, ParameterSpec
from .string import StringParameterDefinition
from .values import StringParameterValue

__all__ = [
    "ParameterDefinitionBase",
    "ParameterDescriptor",
    "ChoiceParameterDefinition",
    "StringParameterDefinition",
    "ParameterForm",
    "ParameterSpec",
    "ExecutionTarget",
    "StringParameterValue",
    "ParameterValueError",
    "InvalidChoiceError",
    "MalformedSubmissionError",
]
