"""Shared fixtures for curry-chain tests."""

from __future__ import annotations

from typing import Any, Callable

import pytest


class RecordingFunction:
    """Three-argument adder that records every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, a: Any, b: Any, c: Any, *rest: Any) -> Any:
        self.calls.append((a, b, c, *rest))
        return a + b + c + sum(rest)


@pytest.fixture
def add3() -> Callable[[int, int, int], int]:
    def add_three(a, b, c):
        return a + b + c

    return add_three


@pytest.fixture
def recorder() -> RecordingFunction:
    return RecordingFunction()
