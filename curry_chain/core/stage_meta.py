"""Typed stage metadata and arity options."""

from __future__ import annotations

import enum

from pydantic import BaseModel


class ArityMode(str, enum.Enum):
    """How a source function's parameter count is turned into an arity.

    REQUIRED counts leading positional parameters up to the first one with a
    default or the ``*args`` catch-all. POSITIONAL also counts positional
    parameters that have defaults.
    """

    REQUIRED = "required"
    POSITIONAL = "positional"


class StageInfo(BaseModel):
    """Snapshot of one stage in a curried chain."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: str
    arity: int
    supplied: int
    remaining: int
    saturated: bool
    args: tuple[str, ...] = ()
