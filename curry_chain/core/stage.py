"""Curry transformer: turns an n-ary function into a chain of stages.

A Stage closes over the source function, its arity (fixed once, when curry()
is applied) and the tuple of arguments accumulated along one call path.
Calling a stage never mutates it: each call builds a fresh tuple, so sibling
calls on the same intermediate stage cannot see each other's arguments.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, TypeVar, overload

from curry_chain.core.arity import POSITIONAL_KINDS, compute_arity, count_arity
from curry_chain.core.curried_types import Curried0, Curried1, Curried2, Curried3, Curried4
from curry_chain.core.errors import InvalidArity, InvalidCurryTarget
from curry_chain.core.stage_meta import ArityMode, StageInfo

_T1 = TypeVar("_T1")
_T2 = TypeVar("_T2")
_T3 = TypeVar("_T3")
_T4 = TypeVar("_T4")
_R = TypeVar("_R")


class Stage:
    """One link of a curried chain.

    Invoking a stage with arguments appends them to the accumulated tuple.
    Once the tuple holds at least ``arity`` values the source function is
    called with all of them (extras are forwarded, never truncated) and its
    result is returned. Otherwise a new Stage over the longer tuple is
    returned. A zero-argument call follows the same rule, so it invokes an
    arity-0 function and is a no-op on an unsaturated stage.
    """

    def __init__(self, func: Callable[..., Any], arity: int, args: tuple[Any, ...] = ()) -> None:
        self._func = func
        self._arity = arity
        self._args = tuple(args)
        functools.update_wrapper(self, func, updated=())

    def __call__(self, *args: Any) -> Any:
        accumulated = self._args + args
        if len(accumulated) >= self._arity:
            return self._func(*accumulated)
        return Stage(self._func, self._arity, accumulated)

    @property
    def func(self) -> Callable[..., Any]:
        return self._func

    @property
    def arity(self) -> int:
        return self._arity

    @property
    def args(self) -> tuple[Any, ...]:
        return self._args

    @property
    def remaining(self) -> int:
        """Number of arguments still needed before the source function runs."""
        return max(self._arity - len(self._args), 0)

    @property
    def __signature__(self) -> inspect.Signature:
        # Supplied positional parameters are dropped, like functools.partial.
        # The result always reports exactly `remaining` required positionals.
        try:
            sig = inspect.signature(self._func)
        except (TypeError, ValueError):
            sig = inspect.Signature()
        to_drop = len(self._args)
        kept = []
        for param in sig.parameters.values():
            if to_drop and param.kind in POSITIONAL_KINDS:
                to_drop -= 1
                continue
            kept.append(param)
        if count_arity(kept) != self.remaining:
            kept = [
                inspect.Parameter(f"arg{i}", inspect.Parameter.POSITIONAL_ONLY)
                for i in range(1, self.remaining + 1)
            ]
            kept.append(inspect.Parameter("rest", inspect.Parameter.VAR_POSITIONAL))
        return sig.replace(parameters=kept)

    def info(self) -> StageInfo:
        """Snapshot of this stage's position in the chain."""
        return StageInfo(
            name=_callable_name(self._func),
            arity=self._arity,
            supplied=len(self._args),
            remaining=self.remaining,
            saturated=len(self._args) >= self._arity,
            args=tuple(repr(a) for a in self._args),
        )

    def __repr__(self) -> str:
        supplied = ", ".join(repr(a) for a in self._args)
        return (
            f"<Stage {_callable_name(self._func)}({supplied}) "
            f"awaiting {self.remaining} of {self._arity}>"
        )


def _callable_name(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or getattr(func, "__name__", None) or type(func).__name__


@overload
def curry(fn: Callable[[], _R]) -> Curried0[_R]: ...
@overload
def curry(fn: Callable[[_T1], _R]) -> Curried1[_T1, _R]: ...
@overload
def curry(fn: Callable[[_T1, _T2], _R]) -> Curried2[_T1, _T2, _R]: ...
@overload
def curry(fn: Callable[[_T1, _T2, _T3], _R]) -> Curried3[_T1, _T2, _T3, _R]: ...
@overload
def curry(fn: Callable[[_T1, _T2, _T3, _T4], _R]) -> Curried4[_T1, _T2, _T3, _T4, _R]: ...
@overload
def curry(
    fn: Callable[..., Any],
    *,
    arity: int | None = None,
    mode: ArityMode = ArityMode.REQUIRED,
) -> Stage: ...


def curry(
    fn: Callable[..., Any],
    *,
    arity: int | None = None,
    mode: ArityMode = ArityMode.REQUIRED,
) -> Any:
    """Transform ``fn`` into the root stage of a curried chain.

    The arity is computed once, here, from the declared signature (see
    ``compute_arity``) unless given explicitly. ``fn`` is not modified.

    >>> add = curry(lambda a, b, c: a + b + c)
    >>> add(1)(2)(3), add(1, 2)(3), add(1)(2, 3), add(1, 2, 3)
    (6, 6, 6, 6)

    Raises
    ------
    InvalidCurryTarget
        If ``fn`` is not callable.
    InvalidArity
        If ``arity`` is given but is not a non-negative int.
    ArityUnavailable
        If ``arity`` is omitted and the signature cannot be introspected.
    """
    if not callable(fn):
        raise InvalidCurryTarget(fn)
    if arity is None:
        arity = compute_arity(fn, mode)
    elif isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
        raise InvalidArity(arity)
    return Stage(fn, arity)
