from __future__ import annotations

"""Argument errors raised to the host's form-processing layer."""

from typing import Optional


class ParameterValueError(ValueError):
    """Base class for rejected parameter submissions."""


class InvalidChoiceError(ParameterValueError):
    """Submitted value matches none of the computed choices."""

    def __init__(self, value: Optional[str]):
        self.value = value
        super().__init__(f"Illegal choice: {value}")


class MalformedSubmissionError(ParameterValueError):
    """Submission cannot be turned into a single parameter value."""

    def __init__(self, name: str, count: int | None = None, *, cause: Exception | None = None):
        self.name = name
        self.count = count
        self.cause = cause
        if cause is not None:
            message = f"Cannot bind submitted value for {name}: {cause}"
        else:
            message = f"Illegal number of parameter values for {name}: {count}"
        super().__init__(message)


__all__ = ["ParameterValueError", "InvalidChoiceError", "MalformedSubmissionError"]
