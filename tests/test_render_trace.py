"""Tests for Rich rendering and JSON export."""

from __future__ import annotations

import json

from rich.console import Console

from curry_chain.analysis.chain_trace import trace_application
from curry_chain.demos.usage import ExampleResult, add_three_numbers, answer, run_examples
from curry_chain.reports.render_trace import (
    examples_to_json,
    render_examples_table,
    render_trace_table,
    trace_to_json,
)


def _console() -> Console:
    return Console(record=True, width=160)


class TestRenderExamples:
    def test_table_lists_examples(self) -> None:
        console = _console()
        render_examples_table(run_examples(), console=console)
        text = console.export_text()
        assert "add, one at a time" in text
        assert "differ" not in text

    def test_mismatch_reported(self) -> None:
        console = _console()
        render_examples_table([ExampleResult("bad", "x", 1, 2)], console=console)
        assert "1 example(s) differ" in console.export_text()

    def test_json_records(self) -> None:
        records = examples_to_json(run_examples())
        json.dumps(records)
        assert all(r["ok"] for r in records)


class TestRenderTrace:
    def test_completed(self) -> None:
        console = _console()
        render_trace_table(trace_application(add_three_numbers, [(1,), (2, 3)]), console=console)
        text = console.export_text()
        assert "add_three_numbers" in text
        assert "Result: 6" in text

    def test_pending(self) -> None:
        console = _console()
        render_trace_table(trace_application(add_three_numbers, [(1,)]), console=console)
        assert "awaiting 2 more" in console.export_text()

    def test_saturated_root(self) -> None:
        console = _console()
        render_trace_table(trace_application(answer, []), console=console)
        text = console.export_text()
        assert "saturated, runs on the next call" in text
        assert "awaiting" not in text

    def test_trace_json(self) -> None:
        data = trace_to_json(trace_application(add_three_numbers, [(1, 2), (3,)]))
        assert json.loads(json.dumps(data)) == data
        assert data["result"] == 6
        assert data["steps"][1]["stage"]["supplied"] == 2
        assert data["pending"] is None
