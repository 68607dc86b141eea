"""Arity computation from a callable's declared signature."""

from __future__ import annotations

import inspect
from typing import Any, Callable, Iterable

from curry_chain.core.errors import ArityUnavailable, InvalidCurryTarget
from curry_chain.core.stage_meta import ArityMode

POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def compute_arity(fn: Callable[..., Any], mode: ArityMode = ArityMode.REQUIRED) -> int:
    """Count the positional parameters of ``fn`` that the chain waits for.

    Keyword-only parameters and ``**kwargs`` never count. In REQUIRED mode
    counting stops at the first parameter with a default or at ``*args``.

    Raises
    ------
    InvalidCurryTarget
        If ``fn`` is not callable.
    ArityUnavailable
        If the signature cannot be introspected.
    """
    if not callable(fn):
        raise InvalidCurryTarget(fn)
    mode = ArityMode(mode)
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError) as e:
        raise ArityUnavailable(fn, str(e)) from e

    return count_arity(sig.parameters.values(), mode)


def count_arity(
    parameters: Iterable[inspect.Parameter], mode: ArityMode = ArityMode.REQUIRED,
) -> int:
    """Arity of an already introspected parameter list."""
    mode = ArityMode(mode)
    count = 0
    for param in parameters:
        if param.kind not in POSITIONAL_KINDS:
            if mode == ArityMode.REQUIRED and param.kind == inspect.Parameter.VAR_POSITIONAL:
                break
            continue
        if mode == ArityMode.REQUIRED and param.default is not inspect.Parameter.empty:
            break
        count += 1
    return count
