"""Shared sink that keeps every measured result observable.

Each workload folds its per-invocation total into one ``Accumulator`` so the
value of every noise call flows into state that outlives the timed loop. The
accumulator is created once per run, handed to every workload when it is
built, and never reset.

Not safe for concurrent writers: measurement is strictly sequential. A
parallel runner would need one accumulator per scenario merged at the end,
or a lock around ``add``.
"""

from __future__ import annotations

import math


class Accumulator:
    """A single mutable float cell."""

    __slots__ = ("value",)

    def __init__(self, value: float = 0.0) -> None:
        self.value = value

    def add(self, amount: float) -> None:
        self.value += amount

    def is_sentinel(self) -> bool:
        """Terminal check on the accumulated value; true only when it overflowed."""
        return math.isinf(self.value)

    def __repr__(self) -> str:
        return f"Accumulator(value={self.value!r})"


__all__ = ["Accumulator"]
