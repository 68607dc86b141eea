"""Static types for curried chains of arity 0 through 4.

Each ``CurriedN`` protocol lists every way the remaining arguments can be
grouped across calls. Chains above arity 4, and chains built with an
explicit ``arity=``, are typed as plain ``Stage`` objects returning ``Any``.
Zero-argument calls on unsaturated stages are accepted at runtime but not
advertised here.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, overload

_A1 = TypeVar("_A1", contravariant=True)
_A2 = TypeVar("_A2", contravariant=True)
_A3 = TypeVar("_A3", contravariant=True)
_A4 = TypeVar("_A4", contravariant=True)
_R = TypeVar("_R", covariant=True)

MAX_TYPED_ARITY = 4


class Curried0(Protocol[_R]):
    def __call__(self) -> _R: ...


class Curried1(Protocol[_A1, _R]):
    def __call__(self, a1: _A1, /) -> _R: ...


class Curried2(Protocol[_A1, _A2, _R]):
    @overload
    def __call__(self, a1: _A1, /) -> Curried1[_A2, _R]: ...
    @overload
    def __call__(self, a1: _A1, a2: _A2, /) -> _R: ...


class Curried3(Protocol[_A1, _A2, _A3, _R]):
    @overload
    def __call__(self, a1: _A1, /) -> Curried2[_A2, _A3, _R]: ...
    @overload
    def __call__(self, a1: _A1, a2: _A2, /) -> Curried1[_A3, _R]: ...
    @overload
    def __call__(self, a1: _A1, a2: _A2, a3: _A3, /) -> _R: ...


class Curried4(Protocol[_A1, _A2, _A3, _A4, _R]):
    @overload
    def __call__(self, a1: _A1, /) -> Curried3[_A2, _A3, _A4, _R]: ...
    @overload
    def __call__(self, a1: _A1, a2: _A2, /) -> Curried2[_A3, _A4, _R]: ...
    @overload
    def __call__(self, a1: _A1, a2: _A2, a3: _A3, /) -> Curried1[_A4, _R]: ...
    @overload
    def __call__(self, a1: _A1, a2: _A2, a3: _A3, a4: _A4, /) -> _R: ...
