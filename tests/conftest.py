from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest
from noisebench.accumulator import Accumulator
from noisebench.config import BenchSettings

from tests.fakes import FakeClock


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "benchmark: spins a real wall-clock timing loop (deselect with '-m \"not benchmark\"')",
    )


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    filters = list(root.filters)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.filters[:] = filters
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("NOISEBENCH_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def accumulator() -> Accumulator:
    return Accumulator()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fast_settings() -> BenchSettings:
    return BenchSettings(warmup_iterations=2, duration_s=3.5, grid_size=2)
