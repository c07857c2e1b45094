from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class StringParameterValue(BaseModel):
    """A submitted parameter value; unknown JSON fields are ignored on binding.

    JSON numbers bind to their string form, so ``{"value": 2}`` and the query
    value ``"2"`` are the same submission.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    value: Optional[str] = None
    description: str = ""


__all__ = ["StringParameterValue"]
