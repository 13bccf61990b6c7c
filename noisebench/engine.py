"""Measurement engine: warm-up, then count iterations until a deadline.

The timed phase is a tight busy-poll against a monotonic clock. The number
of completed iterations is the measured quantity; the loop checks the
deadline after each call, so at least one iteration is always timed and the
elapsed time never falls short of the budget.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable
from dataclasses import dataclass

from noisebench.config import BenchSettings
from noisebench.core.logging import scenario_scope
from noisebench.errors import ConfigurationError
from noisebench.registry import ScenarioRegistry, Workload

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


@dataclass(frozen=True, slots=True)
class RawResult:
    """Iteration count and elapsed time from one timed phase."""

    label: str
    iteration_count: int
    elapsed_ms: float


@dataclass(frozen=True, slots=True)
class ScenarioOutcome:
    """Result slot for one scenario; ``raw`` is ``None`` when it failed."""

    label: str
    raw: RawResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.raw is not None


def measure(
    workload: Workload,
    warmup_iterations: int,
    duration_s: float,
    *,
    label: str = "",
    clock: Clock = time.perf_counter,
    max_iterations: int | None = None,
) -> RawResult:
    """Warm *workload* up, then time it for *duration_s* seconds.

    Exceptions raised by the workload are not caught; the scenario is
    abandoned without a result. ``max_iterations`` optionally caps the timed
    phase, in which case it may end before the deadline, but never before
    the clock has advanced past the start timestamp.
    """
    if warmup_iterations < 0:
        raise ConfigurationError(f"warmup_iterations must be >= 0, got {warmup_iterations}")
    if not (duration_s > 0 and math.isfinite(duration_s)):
        raise ConfigurationError(f"duration_s must be finite and > 0, got {duration_s}")
    if max_iterations is not None and max_iterations < 1:
        raise ConfigurationError(f"max_iterations must be >= 1, got {max_iterations}")

    for _ in range(warmup_iterations):
        workload()

    iterations = 0
    start = clock()
    deadline = start + duration_s
    while True:
        workload()
        iterations += 1
        now = clock()
        if now >= deadline:
            break
        if max_iterations is not None and iterations >= max_iterations and now > start:
            logger.warning("iteration cap %d reached before deadline", max_iterations)
            break

    return RawResult(
        label=label,
        iteration_count=iterations,
        elapsed_ms=(now - start) * 1000,
    )


class BenchmarkRunner:
    """Measures every scenario of a registry, one after another."""

    def __init__(
        self,
        registry: ScenarioRegistry,
        settings: BenchSettings,
        clock: Clock = time.perf_counter,
    ) -> None:
        self._registry = registry
        self._settings = settings
        self._clock = clock
        self._outcomes: list[ScenarioOutcome] = []

    @property
    def outcomes(self) -> list[ScenarioOutcome]:
        return list(self._outcomes)

    def run_all(self) -> list[ScenarioOutcome]:
        """Run all scenarios in registry order.

        By default the first failing scenario aborts the run. With
        ``continue_on_error`` the failure is logged, recorded as an outcome
        without a result, and the remaining scenarios still run.
        """
        self._outcomes.clear()
        total = len(self._registry)
        for index, entry in enumerate(self._registry, start=1):
            with scenario_scope(entry.label):
                logger.info("measuring scenario %d/%d", index, total)
                try:
                    raw = measure(
                        entry.workload,
                        self._settings.warmup_iterations,
                        self._settings.duration_s,
                        label=entry.label,
                        clock=self._clock,
                        max_iterations=self._settings.max_iterations,
                    )
                except ConfigurationError:
                    raise
                except Exception as exc:
                    if not self._settings.continue_on_error:
                        raise
                    logger.exception("scenario failed")
                    self._outcomes.append(
                        ScenarioOutcome(label=entry.label, error=f"{type(exc).__name__}: {exc}")
                    )
                    continue
                logger.info(
                    "%d iterations in %.1f ms",
                    raw.iteration_count,
                    raw.elapsed_ms,
                )
                self._outcomes.append(ScenarioOutcome(label=entry.label, raw=raw))
        return self.outcomes


__all__ = ["BenchmarkRunner", "Clock", "RawResult", "ScenarioOutcome", "measure"]
