"""Derived statistics and text rendering.

``derive`` is the pure numeric projection; the ``render_*`` helpers only
format already-derived values. Formatting uses format-spec grouping rather
than the process locale, so output is identical on every machine.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from noisebench.config import BenchSettings
from noisebench.engine import RawResult, ScenarioOutcome

_RULE_WIDTH = 70
_NOT_AVAILABLE = "N/A"


@dataclass(frozen=True, slots=True)
class DerivedResult:
    label: str
    iterations_per_sec: float
    primitive_calls_per_sec: float
    avg_micros_per_iteration: float


def derive(raw: RawResult, batch_size: int) -> DerivedResult:
    iterations_per_sec = raw.iteration_count / raw.elapsed_ms * 1000
    return DerivedResult(
        label=raw.label,
        iterations_per_sec=iterations_per_sec,
        primitive_calls_per_sec=iterations_per_sec * batch_size,
        avg_micros_per_iteration=(raw.elapsed_ms / raw.iteration_count) * 1000,
    )


def _grouped(value: float) -> str:
    return f"{value:,.0f}"


def _micros(value: float) -> str:
    return f"{value:.2f} μs"


def render_header(settings: BenchSettings) -> str:
    lines = [
        f"simplex noise benchmark ({settings.batch_size} calls per iteration)",
        "",
        f"Duration: {settings.duration_s:g}s per scenario",
        f"Warmup:   {settings.warmup_iterations} iterations",
        "",
    ]
    return "\n".join(lines)


def render_verbose(outcomes: Sequence[ScenarioOutcome], batch_size: int) -> str:
    lines = ["Results:", "-" * _RULE_WIDTH]
    for outcome in outcomes:
        lines.append(outcome.label)
        if outcome.raw is None:
            lines.append(f"  {_NOT_AVAILABLE} ({outcome.error or 'failed'})")
        else:
            derived = derive(outcome.raw, batch_size)
            lines.append(
                f"  {_grouped(derived.iterations_per_sec)} iterations/s "
                f"({_grouped(derived.primitive_calls_per_sec)} noise calls/s)"
            )
            lines.append(
                f"  avg {_micros(derived.avg_micros_per_iteration)} per {batch_size}-call batch"
            )
        lines.append("")
    return "\n".join(lines)


def render_table(outcomes: Sequence[ScenarioOutcome], batch_size: int) -> str:
    lines = [
        "Markdown table:",
        "| Scenario | iterations/s | noise calls/s | avg per batch |",
        "|----------|-------------|---------------|---------------|",
    ]
    for outcome in outcomes:
        if outcome.raw is None:
            cells = [_NOT_AVAILABLE, _NOT_AVAILABLE, _NOT_AVAILABLE]
        else:
            derived = derive(outcome.raw, batch_size)
            cells = [
                _grouped(derived.iterations_per_sec),
                _grouped(derived.primitive_calls_per_sec),
                _micros(derived.avg_micros_per_iteration),
            ]
        lines.append(f"| {outcome.label} | {' | '.join(cells)} |")
    return "\n".join(lines)


def render_report(outcomes: Sequence[ScenarioOutcome], batch_size: int) -> str:
    return "\n".join(
        [
            render_verbose(outcomes, batch_size),
            "",
            render_table(outcomes, batch_size),
        ]
    )


__all__ = [
    "DerivedResult",
    "derive",
    "render_header",
    "render_report",
    "render_table",
    "render_verbose",
]
