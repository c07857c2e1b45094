from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class ExecutionTarget(str, Enum):
    LOCAL = "local"
    REMOTE = "remote"


class ParameterSpec(BaseModel):
    """Static configuration of a script-backed parameter."""

    model_config = ConfigDict(frozen=True)

    name: str
    script: str
    description: str = ""
    execution_target: ExecutionTarget = ExecutionTarget.LOCAL
    uuid: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _remote_flag(cls, data: Any) -> Any:
        # `remote: true` is accepted as shorthand for `execution_target: remote`
        if isinstance(data, dict) and "remote" in data:
            data = dict(data)
            remote = data.pop("remote")
            if "execution_target" not in data:
                data["execution_target"] = ExecutionTarget.REMOTE if remote else ExecutionTarget.LOCAL
        return data

    @field_validator("name")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("parameter name cannot be empty")
        return v

    @property
    def remote(self) -> bool:
        return self.execution_target is ExecutionTarget.REMOTE


__all__ = ["ExecutionTarget", "ParameterSpec"]
