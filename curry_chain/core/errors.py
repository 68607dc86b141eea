"""Error taxonomy for the curry transformer.

Only malformed input to ``curry`` is reported here. Anything the source
function raises when the chain finally invokes it propagates unwrapped.
"""

from __future__ import annotations

from typing import Any


class CurryError(Exception):
    """Base class for errors raised by curry_chain itself."""


class InvalidCurryTarget(CurryError, TypeError):
    """Raised by curry() when the value to transform is not callable."""

    def __init__(self, target: Any) -> None:
        self.target = target
        self.type_name = type(target).__name__
        super().__init__(f"curry() expects a callable, got {self.type_name}: {target!r}")


class ArityUnavailable(CurryError, ValueError):
    """Raised when a callable's parameter count cannot be introspected."""

    def __init__(self, target: Any, reason: str = "") -> None:
        self.target = target
        self.reason = reason
        msg = f"Cannot determine arity of {target!r}"
        if reason:
            msg += f" ({reason})"
        msg += "; pass arity= explicitly"
        super().__init__(msg)


class InvalidArity(CurryError, ValueError):
    """Raised when an explicit arity is not a non-negative integer."""

    def __init__(self, arity: Any) -> None:
        self.arity = arity
        super().__init__(f"arity must be a non-negative int, got {arity!r}")


class LeftOverArguments(CurryError, ValueError):
    """Raised when argument groups remain after a chain has completed."""

    def __init__(self, name: str, used: int, left_over: int) -> None:
        self.name = name
        self.used = used
        self.left_over = left_over
        super().__init__(
            f"Chain for {name} completes after {used} group(s); "
            f"{left_over} group(s) left over"
        )
