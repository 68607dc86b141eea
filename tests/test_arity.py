"""Tests for arity computation."""

from __future__ import annotations

import functools

import pytest

from curry_chain.core.arity import compute_arity
from curry_chain.core.errors import ArityUnavailable, CurryError, InvalidCurryTarget
from curry_chain.core.stage_meta import ArityMode


class _Opaque:
    """Callable whose signature cannot be introspected."""

    __signature__ = 42

    def __call__(self, *args):
        return args


class _Greeter:
    def greet(self, greeting, name):
        return f"{greeting}, {name}!"


class TestRequiredMode:
    def test_plain_positional(self, add3) -> None:
        assert compute_arity(add3) == 3

    def test_no_parameters(self) -> None:
        assert compute_arity(lambda: 42) == 0

    def test_stops_at_first_default(self) -> None:
        def f(a, b=1, c=2):
            return a + b + c

        assert compute_arity(f) == 1

    def test_stops_at_var_positional(self) -> None:
        def f(a, b, *rest):
            return (a, b, rest)

        assert compute_arity(f) == 2

    def test_keyword_only_not_counted(self) -> None:
        def f(a, *, key, **kwargs):
            return a, key

        assert compute_arity(f) == 1

    def test_positional_only_counted(self) -> None:
        def f(a, b, /, c):
            return a + b + c

        assert compute_arity(f) == 3

    def test_bound_method_excludes_receiver(self) -> None:
        assert compute_arity(_Greeter().greet) == 2
        assert compute_arity(_Greeter.greet) == 3

    def test_partial_reports_remaining(self, add3) -> None:
        assert compute_arity(functools.partial(add3, 1)) == 2


class TestPositionalMode:
    def test_counts_defaults(self) -> None:
        def f(a, b=1, c=2):
            return a + b + c

        assert compute_arity(f, ArityMode.POSITIONAL) == 3

    def test_ignores_var_positional(self) -> None:
        def f(a, b=1, *rest, key=None):
            return a

        assert compute_arity(f, ArityMode.POSITIONAL) == 2

    def test_mode_accepts_string_value(self) -> None:
        def f(a, b=1):
            return a + b

        assert compute_arity(f, "positional") == 2


class TestArityErrors:
    def test_non_callable(self) -> None:
        with pytest.raises(InvalidCurryTarget, match="int"):
            compute_arity(5)

    def test_non_callable_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            compute_arity("not a function")

    def test_signature_unavailable(self) -> None:
        with pytest.raises(ArityUnavailable, match="arity="):
            compute_arity(_Opaque())

    def test_errors_share_base(self) -> None:
        with pytest.raises(CurryError):
            compute_arity(_Opaque())

    def test_unknown_mode(self, add3) -> None:
        with pytest.raises(ValueError):
            compute_arity(add3, "sometimes")
