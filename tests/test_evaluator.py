import logging

import pytest

from dynparam.core.evaluation import (
    DispatchingScriptEvaluator,
    PythonScriptEvaluator,
    ScriptEvaluator,
    is_list_shaped,
    string_form,
)
from dynparam.core.parameters import ExecutionTarget, ParameterSpec


def _spec(script: str, **kwargs) -> ParameterSpec:
    return ParameterSpec(name="P", script=script, **kwargs)


def test_expression_script():
    assert PythonScriptEvaluator().evaluate(_spec('["a", "b", None]')) == ["a", "b", None]


def test_statement_script_returns_result_variable():
    script = "items = []\nfor i in range(3):\n    items.append('v' + str(i))\nresult = items\n"

    assert PythonScriptEvaluator().evaluate(_spec(script)) == ["v0", "v1", "v2"]


def test_statement_script_without_result_is_absent():
    assert PythonScriptEvaluator().evaluate(_spec("x = 1\ny = 2\n")) is None


def test_script_globals_are_available():
    evaluator = PythonScriptEvaluator({"branches": ["main", "dev"]})

    assert evaluator.evaluate(_spec("sorted(branches)")) == ["dev", "main"]


def test_each_evaluation_uses_fresh_namespace():
    evaluator = PythonScriptEvaluator()
    evaluator.evaluate(_spec("result = 1\nleaked = True\n"))

    assert evaluator.evaluate(_spec("leaked")) is None


def test_failing_script_is_logged_and_absent(caplog):
    with caplog.at_level(logging.ERROR, logger="dynparam"):
        assert PythonScriptEvaluator().evaluate(_spec("1 / 0")) is None

    assert any("P" in r.getMessage() and r.exc_info for r in caplog.records)


def test_syntax_error_is_absent():
    assert PythonScriptEvaluator().evaluate(_spec("def (:")) is None


@pytest.mark.parametrize(
    "script",
    [
        "__import__('os').getpid()",
        "import os\nresult = os.getpid()\n",
        "open('/etc/passwd').read()",
        "().__class__.__bases__",
    ],
)
def test_unsafe_script_is_refused_and_logged(script, caplog):
    with caplog.at_level(logging.ERROR, logger="dynparam"):
        assert PythonScriptEvaluator().evaluate(_spec(script)) is None

    assert any("'P'" in r.getMessage() for r in caplog.records if r.levelno == logging.ERROR)


def test_common_builtins_are_available():
    script = "result = sorted(set(map(str, [3, 1, 3])))\n"

    assert PythonScriptEvaluator().evaluate(_spec(script)) == ["1", "3"]


def test_tuple_unpacking_and_indexing():
    script = "pairs = [('a', 1), ('b', 2)]\nresult = [name for name, n in pairs if pairs[0][1] == 1]\n"

    assert PythonScriptEvaluator().evaluate(_spec(script)) == ["a", "b"]


class _Recorder:
    def __init__(self, value):
        self.value = value
        self.specs = []

    def evaluate(self, spec):
        self.specs.append(spec)
        return self.value


def test_dispatch_local():
    local, remote = _Recorder(["l"]), _Recorder(["r"])
    evaluator = DispatchingScriptEvaluator(local, remote)

    assert evaluator.evaluate(_spec("x")) == ["l"]
    assert remote.specs == []


def test_dispatch_remote():
    local, remote = _Recorder(["l"]), _Recorder(["r"])
    evaluator = DispatchingScriptEvaluator(local, remote)

    assert evaluator.evaluate(_spec("x", execution_target=ExecutionTarget.REMOTE)) == ["r"]
    assert local.specs == []


def test_dispatch_remote_without_remote_evaluator(caplog):
    evaluator = DispatchingScriptEvaluator(_Recorder(["l"]))

    with caplog.at_level(logging.ERROR, logger="dynparam"):
        assert evaluator.evaluate(_spec("x", remote=True)) is None

    assert "No remote evaluator" in caplog.text


def test_protocol_is_runtime_checkable():
    assert isinstance(PythonScriptEvaluator(), ScriptEvaluator)
    assert isinstance(_Recorder(None), ScriptEvaluator)


@pytest.mark.parametrize(
    "value, expected",
    [(None, None), ("a", "a"), (1, "1"), (2.5, "2.5"), (False, "False")],
)
def test_string_form(value, expected):
    assert string_form(value) == expected


def test_is_list_shaped():
    assert is_list_shaped([])
    assert is_list_shaped(("a",))
    assert not is_list_shaped("ab")
    assert not is_list_shaped({"a": 1})
    assert not is_list_shaped(None)


def test_remote_flag_maps_to_execution_target():
    assert _spec("x", remote=True).execution_target is ExecutionTarget.REMOTE
    assert _spec("x", remote=False).execution_target is ExecutionTarget.LOCAL
    assert _spec("x").remote is False


def test_spec_is_immutable():
    spec = _spec("x")

    with pytest.raises(Exception):
        spec.name = "Q"  # type: ignore[misc]


def test_spec_rejects_empty_name():
    with pytest.raises(ValueError):
        ParameterSpec(name="", script="x")
