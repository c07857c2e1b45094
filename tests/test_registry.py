import pytest

from dynparam.core.evaluation import PythonScriptEvaluator
from dynparam.core.parameters import (
    ChoiceParameterDefinition,
    ParameterForm,
    ParameterSpec,
    StringParameterDefinition,
)
from dynparam.core.registries import NameRegistry, RegistryManager
from dynparam.core.request import ParameterRequest


def test_register_defaults_is_idempotent():
    rm = RegistryManager()
    rm.register_defaults()
    rm.register_defaults()

    assert list(rm.descriptors.names()) == ["dynamic_choice", "dynamic_string"]
    assert rm.descriptors.get("dynamic_choice").display_name == "Dynamic Choice Parameter"


def test_descriptor_creates_definition(evaluator_factory):
    rm = RegistryManager()
    rm.register_defaults()
    evaluator = evaluator_factory(["a"])

    definition = rm.descriptors.get("dynamic_choice").new_instance(
        ParameterSpec(name="P", script="x"), evaluator=evaluator
    )

    assert isinstance(definition, ChoiceParameterDefinition)
    assert definition.evaluator is evaluator
    assert definition.DESCRIPTOR.type_id == "dynamic_choice"


def test_name_registry_errors():
    registry: NameRegistry[int] = NameRegistry()
    registry.register("a", 1)

    with pytest.raises(ValueError, match="Duplicate registration"):
        registry.register("a", 2)
    with pytest.raises(KeyError, match="Available: a"):
        registry.get("b")
    assert "a" in registry


def test_form_lookup_and_values(evaluator_factory):
    choice = ChoiceParameterDefinition(
        ParameterSpec(name="TARGET", script="x"), evaluator=evaluator_factory(["dev", "prod"])
    )
    text = StringParameterDefinition(ParameterSpec(name="NOTE", script="x"), evaluator=evaluator_factory("hi"))
    form = ParameterForm("deploy", [choice, text])

    values = form.create_values(ParameterRequest.from_pairs([("TARGET", "prod")]))

    assert [(v.name, v.value) for v in values] == [("TARGET", "prod"), ("NOTE", "hi")]
    with pytest.raises(KeyError, match="Unknown parameter: X"):
        form.get("X")
    with pytest.raises(ValueError):
        form.add(choice)


def test_request_values():
    request = ParameterRequest.from_pairs([("A", "1"), ("A", "2"), ("B", "3")])

    assert request.get_parameter_values("A") == ["1", "2"]
    assert request.get_parameter_values("B") == ["3"]
    assert request.get_parameter_values("C") is None


def test_registry_evaluator_is_typed():
    evaluator = PythonScriptEvaluator()
    rm = RegistryManager(evaluator=evaluator)

    assert rm.get_evaluator() is evaluator
    with pytest.raises(ValueError):
        RegistryManager(evaluator="not an evaluator")


def test_registry_default_evaluator_is_created_once():
    rm = RegistryManager()

    assert rm.get_evaluator() is rm.get_evaluator()
