"""ChainTrace: record of a curried chain applied one argument group at a time.

Each step keeps the StageInfo of the stage that was called together with
the group of arguments it received, so the accumulation can be inspected
after the fact.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from curry_chain.core.errors import LeftOverArguments
from curry_chain.core.stage import Stage, curry
from curry_chain.core.stage_meta import ArityMode, StageInfo


@dataclass(frozen=True)
class TraceStep:
    """One stage invocation."""

    stage: StageInfo
    supplied: tuple[Any, ...]

    @property
    def accumulated(self) -> int:
        return self.stage.supplied + len(self.supplied)


@dataclass(frozen=True)
class ChainTrace:
    """Full trace of a chain, from the root stage to a result or a pending stage."""

    name: str
    arity: int
    steps: list[TraceStep] = field(default_factory=list)
    completed: bool = False
    result: Any = None
    pending: StageInfo | None = None

    def format(self, indent: int = 2) -> str:
        """Format as human-readable multi-line string."""
        pad = " " * indent
        lines = [f"Chain {self.name} (arity {self.arity}):"]
        for i, step in enumerate(self.steps):
            group = ", ".join(repr(a) for a in step.supplied)
            lines.append(
                f"{pad}[{i}] ({group}) -> {step.accumulated}/{self.arity} supplied"
            )
        if self.completed:
            lines.append(f"{pad}result: {self.result!r}")
        elif self.pending is not None and self.pending.saturated:
            lines.append(f"{pad}pending: saturated, runs on the next call")
        elif self.pending is not None:
            lines.append(f"{pad}pending: awaiting {self.pending.remaining} more")
        return "\n".join(lines)


def trace_application(
    fn: Callable[..., Any],
    groups: Sequence[Sequence[Any]],
    arity: int | None = None,
    mode: ArityMode = ArityMode.REQUIRED,
) -> ChainTrace:
    """Curry ``fn`` and apply ``groups`` in order, recording every step.

    If the groups run out first, the trace ends with the pending stage.

    Raises
    ------
    LeftOverArguments
        If argument groups remain after the chain has produced its result.
    """
    stage: Stage = curry(fn, arity=arity, mode=mode)
    root = stage.info()
    steps: list[TraceStep] = []

    for i, group in enumerate(groups):
        group = tuple(group)
        before = stage.info()
        steps.append(TraceStep(stage=before, supplied=group))
        terminal = before.supplied + len(group) >= before.arity
        left_over = len(groups) - i - 1
        if terminal and left_over:
            # Checked before the call so the source function never runs.
            raise LeftOverArguments(root.name, i + 1, left_over)
        outcome = stage(*group)
        if terminal:
            return ChainTrace(
                name=root.name,
                arity=root.arity,
                steps=steps,
                completed=True,
                result=outcome,
            )
        stage = outcome

    return ChainTrace(name=root.name, arity=root.arity, steps=steps, pending=stage.info())
