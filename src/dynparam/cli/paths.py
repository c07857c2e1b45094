from __future__ import annotations

"""Utilities for resolving the parameter forms directory."""

import os
from pathlib import Path

FORMS_ENV_VAR = "DYNPARAM_FORMS"


def forms_path(path: str | None) -> str:
    """Explicit path, else ``$DYNPARAM_FORMS``, else ``./parameters``."""
    if path:
        return path
    env = os.environ.get(FORMS_ENV_VAR)
    if env:
        return env
    return str(Path.cwd() / "parameters")
