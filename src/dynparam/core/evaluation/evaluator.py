"""Script evaluation: the collaborator that turns a parameter script into a value.

Definitions never execute scripts themselves; they call a ``ScriptEvaluator``.
Two implementations live here:

- ``PythonScriptEvaluator`` runs the script in-process.
- ``DispatchingScriptEvaluator`` routes a spec to a local or remote evaluator
  according to its execution target.

Remote transport is not provided; any object with an ``evaluate(spec)``
method can be plugged in as the remote side.
"""

from __future__ import annotations

import builtins
import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Protocol, runtime_checkable

from RestrictedPython import compile_restricted, safe_builtins
from RestrictedPython.Eval import default_guarded_getitem, default_guarded_getiter
from RestrictedPython.Guards import (
    full_write_guard,
    guarded_iter_unpack_sequence,
    guarded_unpack_sequence,
    safer_getattr,
)

from dynparam.utils.logging import log_calls

if TYPE_CHECKING:
    from dynparam.core.parameters.spec import ParameterSpec

logger = logging.getLogger(__name__)

RESULT_VARIABLE = "result"

# Pure helpers on top of RestrictedPython.safe_builtins; nothing that reaches the filesystem or imports.
EXTRA_BUILTINS = ("all", "any", "dict", "enumerate", "filter", "list", "map", "max", "min", "reversed", "set", "sum")


@runtime_checkable
class ScriptEvaluator(Protocol):
    def evaluate(self, spec: ParameterSpec) -> Any:
        """Return the script's result, or ``None`` when it produced nothing."""
        ...


def is_list_shaped(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def string_form(value: Any) -> Optional[str]:
    """Canonical string used to compare script results with submitted strings."""
    if value is None:
        return None
    return str(value)


def build_restricted_globals(extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Globals for RestrictedPython code: safe builtins plus the guard hooks it calls."""
    script_builtins = dict(safe_builtins)
    for name in EXTRA_BUILTINS:
        script_builtins[name] = getattr(builtins, name)
    namespace: Dict[str, Any] = {
        "__builtins__": script_builtins,
        "_getattr_": safer_getattr,
        "_getitem_": default_guarded_getitem,
        "_getiter_": default_guarded_getiter,
        "_iter_unpack_sequence_": guarded_iter_unpack_sequence,
        "_unpack_sequence_": guarded_unpack_sequence,
        "_write_": full_write_guard,
    }
    namespace.update(extra or {})
    return namespace


class PythonScriptEvaluator:
    """Evaluate parameter scripts as restricted Python in the current process.

    A script consisting of a single expression yields that expression's value.
    Anything else is executed as a statement block and yields whatever it
    bound to ``result``. Scripts see only safe builtins and the configured
    globals; imports and underscore names are refused at compile time.
    Failures are logged and reported as ``None``.
    """

    def __init__(self, globals_: Optional[Dict[str, Any]] = None):
        self.globals = dict(globals_ or {})

    @log_calls(__name__)
    def evaluate(self, spec: ParameterSpec) -> Any:
        filename = f"<parameter {spec.name}>"
        namespace = build_restricted_globals(self.globals)
        try:
            try:
                code = compile_restricted(spec.script, filename, "eval")
            except SyntaxError:
                code = None
            if code is not None:
                return eval(code, namespace)
            exec(compile_restricted(spec.script, filename, "exec"), namespace)
        except Exception:
            logger.exception("Script for parameter '%s' failed", spec.name)
            return None
        return namespace.get(RESULT_VARIABLE)


class DispatchingScriptEvaluator:
    """Route evaluation by ``spec.execution_target``."""

    def __init__(self, local: ScriptEvaluator, remote: Optional[ScriptEvaluator] = None):
        self.local = local
        self.remote = remote

    def evaluate(self, spec: ParameterSpec) -> Any:
        if spec.remote:
            if self.remote is None:
                logger.error("No remote evaluator configured for parameter '%s'", spec.name)
                return None
            return self.remote.evaluate(spec)
        return self.local.evaluate(spec)


def default_evaluator() -> DispatchingScriptEvaluator:
    return DispatchingScriptEvaluator(local=PythonScriptEvaluator())


__all__ = [
    "ScriptEvaluator",
    "PythonScriptEvaluator",
    "build_restricted_globals",
    "DispatchingScriptEvaluator",
    "default_evaluator",
    "is_list_shaped",
    "string_form",
]
