from __future__ import annotations

"""Errors raised while loading parameter form files."""

import os
from typing import Iterable

import yaml
from pydantic import ValidationError

MAX_REPORTED_ERRORS = 3


class LoaderError(RuntimeError):
    """A form file that could not be read, validated or registered."""

    def __init__(self, file_path: str, message: str, *, cause: Exception | None = None):
        self.file_path = file_path
        self.message = message
        self.cause = cause
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        base = f"{self.message} ({self._location()})"
        if isinstance(self.cause, ValidationError):
            return f"{base}: {self._format_validation_errors(self.cause.errors())}"
        if isinstance(self.cause, yaml.YAMLError):
            problem = getattr(self.cause, "problem", None) or str(self.cause)
            return f"{base}: {problem}"
        if isinstance(self.cause, KeyError):
            return f"{base}: {self.cause.args[0] if self.cause.args else self.cause}"
        if self.cause:
            return f"{base}: {self.cause}"
        return base

    def _location(self) -> str:
        try:
            path = os.path.relpath(self.file_path)
        except ValueError:  # pragma: no cover - different drive on Windows
            path = self.file_path
        mark = getattr(self.cause, "problem_mark", None)
        if mark is not None:
            return f"{path}:{mark.line + 1}"
        return path

    @staticmethod
    def _format_validation_errors(errors: Iterable[dict]) -> str:
        error_list = list(errors)
        snippets = []
        for err in error_list[:MAX_REPORTED_ERRORS]:
            loc = ".".join(str(entry) for entry in err.get("loc", [])) or "<root>"
            snippets.append(f"{loc}: {err.get('msg') or err.get('type') or 'validation error'}")
        remaining = len(error_list) - len(snippets)
        if remaining > 0:
            snippets.append(f"... ({remaining} more)")
        return "; ".join(snippets)

    def __str__(self) -> str:
        return self._build_message()
