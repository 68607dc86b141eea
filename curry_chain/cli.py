"""CLI entry point using Typer."""

from __future__ import annotations

import importlib
import json
from typing import Any, Callable, Optional

import typer

from curry_chain.core.errors import CurryError

app = typer.Typer(name="curry-chain", help="Curry functions into chains of stages")


def resolve_target(target: str) -> Callable[..., Any]:
    """Import ``module:attribute`` (dotted attributes allowed)."""
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise typer.BadParameter(f"expected module:attribute, got {target!r}")
    obj: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)
    return obj


def parse_group(raw: str) -> tuple[Any, ...]:
    """Split a comma-separated group; JSON literals are decoded, the rest kept as strings."""
    if raw == "":
        return ()
    values: list[Any] = []
    for item in raw.split(","):
        item = item.strip()
        try:
            values.append(json.loads(item))
        except json.JSONDecodeError:
            values.append(item)
    return tuple(values)


@app.command("demo")
def demo(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Run the worked examples and compare each chain with its direct call."""
    from curry_chain.demos.usage import run_examples
    from curry_chain.reports.render_trace import examples_to_json, render_examples_table

    results = run_examples()

    if json_output:
        typer.echo(json.dumps(examples_to_json(results), indent=2, default=str))
    else:
        render_examples_table(results)

    if not all(r.ok for r in results):
        raise typer.Exit(code=1)


@app.command("apply")
def apply(
    target: str = typer.Argument(..., help="Callable to curry, as module:attribute"),
    groups: Optional[list[str]] = typer.Argument(
        None, help='Argument groups, one per stage call (e.g. "1,2" "3")',
    ),
    arity: Optional[int] = typer.Option(None, help="Explicit arity instead of introspection"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Curry TARGET and feed it one argument group per call, showing each stage.

    Errors raised by TARGET itself propagate unchanged.
    """
    from curry_chain.analysis.chain_trace import trace_application
    from curry_chain.reports.render_trace import render_trace_table, trace_to_json

    try:
        fn = resolve_target(target)
    except (ImportError, AttributeError) as e:
        typer.echo(f"Cannot resolve {target}: {e}", err=True)
        raise typer.Exit(code=1)

    parsed = [parse_group(g) for g in groups or []]
    try:
        trace = trace_application(fn, parsed, arity=arity)
    except CurryError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    if json_output:
        typer.echo(json.dumps(trace_to_json(trace), indent=2, default=str))
    else:
        render_trace_table(trace)


if __name__ == "__main__":
    app()
