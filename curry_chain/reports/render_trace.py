"""Rich tables and JSON export for examples and chain traces."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from curry_chain.analysis.chain_trace import ChainTrace
from curry_chain.demos.usage import ExampleResult


def render_examples_table(results: list[ExampleResult], console: Console | None = None) -> None:
    """Print a Rich table of evaluated examples."""
    if console is None:
        console = Console()

    table = Table(title="Curried chains vs direct calls")
    table.add_column("Example")
    table.add_column("Expression", style="dim")
    table.add_column("Value")
    table.add_column("Match", justify="center")

    for r in results:
        table.add_row(
            escape(r.label),
            escape(r.expression),
            escape(repr(r.value)),
            "yes" if r.ok else "NO",
            style="green" if r.ok else "bold red",
        )

    console.print(table)
    failed = sum(1 for r in results if not r.ok)
    if failed:
        console.print(f"[bold red]{failed} example(s) differ from the direct call[/bold red]")


def render_trace_table(trace: ChainTrace, console: Console | None = None) -> None:
    """Print a Rich table of the stages a chain went through."""
    if console is None:
        console = Console()

    console.print(f"\n[bold]Chain {escape(trace.name)}[/bold] (arity {trace.arity})")

    table = Table()
    table.add_column("Step", justify="right", style="dim")
    table.add_column("Accumulated before")
    table.add_column("Supplied")
    table.add_column("Supplied / arity", justify="right")

    for i, step in enumerate(trace.steps):
        table.add_row(
            str(i),
            escape(", ".join(step.stage.args)),
            escape(", ".join(repr(a) for a in step.supplied)),
            f"{step.accumulated}/{trace.arity}",
        )

    console.print(table)
    if trace.completed:
        console.print(f"[bold]Result:[/bold] {escape(repr(trace.result))}")
    elif trace.pending is not None and trace.pending.saturated:
        console.print("[yellow]Pending:[/yellow] saturated, runs on the next call")
    elif trace.pending is not None:
        console.print(f"[yellow]Pending:[/yellow] awaiting {trace.pending.remaining} more argument(s)")


def examples_to_json(results: list[ExampleResult]) -> list[dict[str, Any]]:
    """Convert examples to JSON-serializable records."""
    return [
        {
            "label": r.label,
            "expression": r.expression,
            "value": r.value,
            "expected": r.expected,
            "ok": r.ok,
        }
        for r in results
    ]


def trace_to_json(trace: ChainTrace) -> dict[str, Any]:
    """Convert a chain trace to a JSON-serializable dict."""
    return {
        "name": trace.name,
        "arity": trace.arity,
        "steps": [
            {
                "stage": step.stage.model_dump(mode="json"),
                "supplied": list(step.supplied),
            }
            for step in trace.steps
        ],
        "completed": trace.completed,
        "result": trace.result,
        "pending": trace.pending.model_dump(mode="json") if trace.pending else None,
    }
