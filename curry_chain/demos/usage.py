"""Worked examples of curried chains.

run_examples() evaluates each example and pairs it with the value the
direct, uncurried call produces, so the demo doubles as a smoke check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from curry_chain.core.stage import curry


def add_three_numbers(a: int, b: int, c: int) -> int:
    return a + b + c


def greet(greeting: str, name: str) -> str:
    return f"{greeting}, {name}!"


def create_user(id: int, name: str, email: str) -> dict[str, Any]:
    return {"id": id, "name": name, "email": email}


def answer() -> int:
    return 42


def add_with_rest(a: int, b: int, c: int, *rest: int) -> int:
    """Three required numbers plus any extras."""
    return a + b + c + sum(rest)


@dataclass(frozen=True)
class ExampleResult:
    """One evaluated example."""

    label: str
    expression: str
    value: Any
    expected: Any

    @property
    def ok(self) -> bool:
        return self.value == self.expected


def run_examples() -> list[ExampleResult]:
    """Evaluate every example chain against its direct call."""
    curried_add = curry(add_three_numbers)
    add_one = curried_add(1)
    add_one_and_two = add_one(2)

    curried_greet = curry(greet)
    say_hello = curried_greet("Hello")
    say_hi = curried_greet("Hi")

    create_id1_user = curry(create_user)(1)
    create_id1_alice = create_id1_user("Alice")

    return [
        ExampleResult(
            "add, one at a time", "curry(add_three_numbers)(1)(2)(3)",
            curried_add(1)(2)(3), add_three_numbers(1, 2, 3),
        ),
        ExampleResult(
            "add, grouped first", "curry(add_three_numbers)(1, 2)(3)",
            curried_add(1, 2)(3), add_three_numbers(1, 2, 3),
        ),
        ExampleResult(
            "add, grouped last", "curry(add_three_numbers)(1)(2, 3)",
            curried_add(1)(2, 3), add_three_numbers(1, 2, 3),
        ),
        ExampleResult(
            "add, all at once", "curry(add_three_numbers)(1, 2, 3)",
            curried_add(1, 2, 3), add_three_numbers(1, 2, 3),
        ),
        ExampleResult(
            "add_one reused", "add_one(2)(3)",
            add_one(2)(3), add_three_numbers(1, 2, 3),
        ),
        ExampleResult(
            "add_one_and_two", "add_one_and_two(3)",
            add_one_and_two(3), add_three_numbers(1, 2, 3),
        ),
        ExampleResult(
            "greeting", 'say_hello("Alice")',
            say_hello("Alice"), greet("Hello", "Alice"),
        ),
        ExampleResult(
            "sibling greeting", 'say_hi("Bob")',
            say_hi("Bob"), greet("Hi", "Bob"),
        ),
        ExampleResult(
            "user record", 'create_id1_alice("alice@example.com")',
            create_id1_alice("alice@example.com"),
            create_user(1, "Alice", "alice@example.com"),
        ),
        ExampleResult(
            "arity 0", "curry(answer)()",
            curry(answer)(), answer(),
        ),
        ExampleResult(
            "extras forwarded", "curry(add_with_rest)(1, 2, 3, 999)",
            curry(add_with_rest)(1, 2, 3, 999), add_with_rest(1, 2, 3, 999),
        ),
    ]
