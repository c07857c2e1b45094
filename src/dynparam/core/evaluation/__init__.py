from .evaluator import (
    DispatchingScriptEvaluator,
    PythonScriptEvaluator,
    ScriptEvaluator,
    build_restricted_globals,
    default_evaluator,
    is_list_shaped,
    string_form,
)

__all__ = [
    "ScriptEvaluator",
    "PythonScriptEvaluator",
    "DispatchingScriptEvaluator",
    "build_restricted_globals",
    "default_evaluator",
    "is_list_shaped",
    "string_form",
]
