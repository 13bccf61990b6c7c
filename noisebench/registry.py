"""Scenario registry: ordered ``(label, workload)`` pairs.

A workload is a zero-argument callable that runs the function under test
over a fixed coordinate batch and folds the sum into the shared
``Accumulator``. Batches are built once, before any timed region, and the
same tuple is reused by every invocation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Protocol

from noisebench.accumulator import Accumulator
from noisebench.noise import NoiseSuite

logger = logging.getLogger(__name__)

Coordinate = tuple[float, float, float]
CoordinateBatch = tuple[Coordinate, ...]


class Workload(Protocol):
    """One unit of work: no inputs, no outputs, impure only via the accumulator."""

    def __call__(self) -> None: ...


@dataclass(frozen=True, slots=True)
class Scenario:
    """A labelled workload. Labels are the report key."""

    label: str
    workload: Workload


class ScenarioRegistry:
    """Ordered collection of scenarios; iteration follows insertion order."""

    def __init__(self) -> None:
        self._scenarios: list[Scenario] = []

    def add(self, label: str, workload: Workload) -> Scenario:
        if label in self.labels():
            logger.warning("scenario label %r registered more than once", label)
        entry = Scenario(label=label, workload=workload)
        self._scenarios.append(entry)
        return entry

    def scenario(self, label: str) -> Callable[[Workload], Workload]:
        """Decorator form of :meth:`add`; returns the function unchanged."""

        def decorator(func: Workload) -> Workload:
            self.add(label, func)
            return func

        return decorator

    def labels(self) -> list[str]:
        return [entry.label for entry in self._scenarios]

    def __iter__(self) -> Iterator[Scenario]:
        return iter(list(self._scenarios))

    def __len__(self) -> int:
        return len(self._scenarios)


def build_coordinate_batch(grid_size: int) -> CoordinateBatch:
    """Sample a ``grid_size``-per-axis cube on ``[0, 1)``, x outermost."""
    if grid_size < 1:
        raise ValueError("grid_size must be >= 1")
    steps = [i / grid_size for i in range(grid_size)]
    return tuple((x, y, z) for x in steps for y in steps for z in steps)


def build_default_registry(
    suite: NoiseSuite,
    batch: CoordinateBatch,
    accumulator: Accumulator,
) -> ScenarioRegistry:
    """Register the 2D, 3D and 4D noise scenarios over *batch*."""
    registry = ScenarioRegistry()
    calls = len(batch)
    noise2 = suite.noise2
    noise3 = suite.noise3
    noise4 = suite.noise4

    @registry.scenario(f"noise2D ({calls} calls)")
    def bench_noise2() -> None:
        total = 0.0
        for x, y, _ in batch:
            total += noise2(x, y)
        accumulator.add(total)

    @registry.scenario(f"noise3D ({calls} calls)")
    def bench_noise3() -> None:
        total = 0.0
        for x, y, z in batch:
            total += noise3(x, y, z)
        accumulator.add(total)

    @registry.scenario(f"noise4D ({calls} calls)")
    def bench_noise4() -> None:
        total = 0.0
        for x, y, z in batch:
            total += noise4(x, y, z, (x + y) / 2)
        accumulator.add(total)

    return registry


__all__ = [
    "Coordinate",
    "CoordinateBatch",
    "Scenario",
    "ScenarioRegistry",
    "Workload",
    "build_coordinate_batch",
    "build_default_registry",
]
