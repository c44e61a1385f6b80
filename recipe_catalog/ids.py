"""
Id generators for stored recipes.

The store never derives ids from the clock. It calls an injected generator,
a zero-argument callable returning a fresh string id:

- uuid_id_generator: random UUID4 hex strings (the default)
- CounterIdGenerator: "recipe-1", "recipe-2", ... (deterministic, for tests
  and for debugging sessions where readable ids help)
"""

import itertools
import uuid
from typing import Callable

IdGenerator = Callable[[], str]

ID_STRATEGIES = ("uuid", "counter")


def uuid_id_generator() -> str:
    """Return a random 32-character hex id."""
    return uuid.uuid4().hex


class CounterIdGenerator:
    """Monotonic counter ids with a fixed prefix."""

    def __init__(self, start: int = 1, prefix: str = "recipe-") -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}{next(self._counter)}"


def get_id_generator(strategy: str) -> IdGenerator:
    """
    Build the id generator for a configured strategy name.

    Args:
        strategy: "uuid" or "counter" (case-insensitive)

    Raises:
        ValueError: If the strategy is unknown
    """
    strategy_norm = (strategy or "").strip().lower()
    if strategy_norm == "uuid":
        return uuid_id_generator
    if strategy_norm == "counter":
        return CounterIdGenerator()
    raise ValueError(
        f"Unknown id strategy: {strategy!r} (expected one of {', '.join(ID_STRATEGIES)})"
    )
