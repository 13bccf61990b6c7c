"""Logging setup with scenario context propagation.

Every record emitted while a scenario is being warmed up or measured carries
that scenario's label, so progress and failure logs can be grouped per
scenario. Logs go to stderr by default; stdout is reserved for the report.
"""

from __future__ import annotations

import contextvars
import json
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import TextIO

_CURRENT_SCENARIO: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "noisebench_scenario",
    default=None,
)


def get_current_scenario() -> str | None:
    """Return the label of the scenario currently being measured, if any."""

    return _CURRENT_SCENARIO.get()


class ScenarioFilter(logging.Filter):
    """Inject the active scenario label into every ``LogRecord``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.scenario = get_current_scenario() or "-"
        return True


class _JsonFormatter(logging.Formatter):
    """Render logs as compact JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object | None] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "scenario": getattr(record, "scenario", None),
        }
        if record.exc_info is not None:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def setup_logging(
    level: int | str = logging.WARNING,
    json_output: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure root logging once with a scenario-aware handler."""

    if isinstance(level, str):
        level = level.upper()

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.filters.clear()

    handler = logging.StreamHandler(stream=stream or sys.stderr)
    if json_output:
        formatter: logging.Formatter = _JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s scenario=%(scenario)s %(message)s",
        )
    handler.setFormatter(formatter)

    scenario_filter = ScenarioFilter()
    handler.addFilter(scenario_filter)
    root_logger.addFilter(scenario_filter)
    root_logger.addHandler(handler)


@contextmanager
def scenario_scope(label: str) -> Iterator[None]:
    """Mark *label* as the active scenario for the duration of the block."""

    token: contextvars.Token[str | None] = _CURRENT_SCENARIO.set(label)
    try:
        yield
    finally:
        _CURRENT_SCENARIO.reset(token)


__all__ = [
    "ScenarioFilter",
    "get_current_scenario",
    "scenario_scope",
    "setup_logging",
]
