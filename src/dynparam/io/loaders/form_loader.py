from __future__ import annotations

import glob
import os
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from dynparam.core.parameters.file_spec import ParameterFormFileSpec
from dynparam.core.parameters.form import ParameterForm
from dynparam.core.registries.registry_manager import RegistryManager
from dynparam.io.loaders.errors import LoaderError


def _read_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise LoaderError(path, "Malformed YAML", cause=exc) from exc
    return data or {}


def load_forms(path: str, registries: RegistryManager) -> None:
    """Load parameter forms from YAML files in a directory tree.

    Expected format:
    form: deploy
    parameters:
      - type: dynamic_choice
        name: TARGET
        script: '["dev", "prod"]'
    """
    if not os.path.exists(path):
        return
    files = sorted(glob.glob(os.path.join(path, "**", "*.yaml"), recursive=True))
    evaluator = registries.get_evaluator()
    for fp in files:
        data = _read_yaml(fp)
        try:
            spec = ParameterFormFileSpec.model_validate(data)
        except ValidationError as exc:
            raise LoaderError(fp, "Invalid parameter form definition", cause=exc) from exc

        form = ParameterForm(spec.form)
        for entry in spec.parameters:
            try:
                descriptor = registries.descriptors.get(entry.type)
            except KeyError as exc:
                raise LoaderError(fp, f"Unknown parameter type '{entry.type}'", cause=exc) from exc
            try:
                parameter_spec = entry.build()
            except ValidationError as exc:
                raise LoaderError(fp, f"Invalid parameter '{entry.name}'", cause=exc) from exc
            form.add(descriptor.new_instance(parameter_spec, evaluator=evaluator))

        try:
            registries.forms.register(form.name, form)
        except Exception as exc:
            raise LoaderError(fp, f"Failed to register form '{form.name}'", cause=exc) from exc
