"""
Shared fixtures for parameter definition tests.
"""

from typing import Any, List

import pytest

from dynparam.core.parameters import ChoiceParameterDefinition, ParameterSpec


class StaticEvaluator:
    """Evaluator double returning queued results; the last one repeats."""

    def __init__(self, *results: Any):
        self.results: List[Any] = list(results) or [None]
        self.calls: List[ParameterSpec] = []

    def evaluate(self, spec: ParameterSpec) -> Any:
        self.calls.append(spec)
        if len(self.results) > 1:
            return self.results.pop(0)
        return self.results[0]


def make_choice(result: Any, *, name: str = "TARGET", description: str = "Deployment target", logger=None):
    evaluator = StaticEvaluator(result)
    spec = ParameterSpec(name=name, script="<opaque>", description=description)
    return ChoiceParameterDefinition(spec, evaluator=evaluator, logger=logger), evaluator


@pytest.fixture
def abc_choice():
    """Choice parameter whose script yields ["a", "b", None]."""
    definition, _ = make_choice(["a", "b", None])
    return definition


@pytest.fixture
def choice_factory():
    """Build a choice parameter around a fixed script result: ``choice_factory(result)``."""
    return make_choice


@pytest.fixture
def evaluator_factory():
    return StaticEvaluator
