"""Tests for the worked examples."""

from __future__ import annotations

from curry_chain.demos.usage import run_examples


class TestExamples:
    def test_all_examples_match_direct_calls(self) -> None:
        results = run_examples()
        assert results
        assert all(r.ok for r in results), [r.label for r in results if not r.ok]

    def test_labels_unique(self) -> None:
        labels = [r.label for r in run_examples()]
        assert len(labels) == len(set(labels))

    def test_user_record_value(self) -> None:
        by_label = {r.label: r for r in run_examples()}
        assert by_label["user record"].value == {
            "id": 1,
            "name": "Alice",
            "email": "alice@example.com",
        }

    def test_extras_value(self) -> None:
        by_label = {r.label: r for r in run_examples()}
        assert by_label["extras forwarded"].value == 1005
