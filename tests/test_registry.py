"""Tests for the scenario registry and the default noise workloads."""

from __future__ import annotations

import logging

import pytest
from noisebench.accumulator import Accumulator
from noisebench.noise import create_noise_suite
from noisebench.registry import (
    ScenarioRegistry,
    build_coordinate_batch,
    build_default_registry,
)

from tests.fakes import ConstantNoise, CountingAccumulator

# --- ScenarioRegistry ---


def test_registry_preserves_insertion_order() -> None:
    registry = ScenarioRegistry()
    for label in ("zeta", "alpha", "mid"):
        registry.add(label, lambda: None)

    assert registry.labels() == ["zeta", "alpha", "mid"]
    assert [entry.label for entry in registry] == ["zeta", "alpha", "mid"]
    assert len(registry) == 3


def test_scenario_decorator_registers_and_returns_function() -> None:
    registry = ScenarioRegistry()

    @registry.scenario("decorated")
    def workload() -> None:
        pass

    entry = next(iter(registry))
    assert entry.label == "decorated"
    assert entry.workload is workload


def test_duplicate_label_is_kept_and_warned(caplog: pytest.LogCaptureFixture) -> None:
    registry = ScenarioRegistry()
    registry.add("dup", lambda: None)

    with caplog.at_level(logging.WARNING, logger="noisebench.registry"):
        registry.add("dup", lambda: None)

    assert registry.labels() == ["dup", "dup"]
    assert "registered more than once" in caplog.text


# --- coordinate batch ---


def test_coordinate_batch_matches_grid_layout() -> None:
    batch = build_coordinate_batch(8)

    assert isinstance(batch, tuple)
    assert len(batch) == 512
    assert batch[0] == (0.0, 0.0, 0.0)
    assert batch[1] == (0.0, 0.0, 0.125)
    assert batch[8] == (0.0, 0.125, 0.0)
    assert batch[-1] == (0.875, 0.875, 0.875)


def test_coordinate_batch_rejects_empty_grid() -> None:
    with pytest.raises(ValueError, match="grid_size"):
        build_coordinate_batch(0)


# --- default workloads ---


def test_default_registry_labels_include_batch_size(accumulator: Accumulator) -> None:
    registry = build_default_registry(
        ConstantNoise().suite(), build_coordinate_batch(8), accumulator
    )

    assert registry.labels() == [
        "noise2D (512 calls)",
        "noise3D (512 calls)",
        "noise4D (512 calls)",
    ]


def test_workloads_fold_into_accumulator_once_per_invocation() -> None:
    noise = ConstantNoise(value=1.0)
    batch = build_coordinate_batch(4)
    accumulator = CountingAccumulator()
    registry = build_default_registry(noise.suite(), batch, accumulator)

    for entry in registry:
        entry.workload()

    assert accumulator.adds == 3
    assert accumulator.value == 3 * len(batch)
    assert len(noise.calls) == 3 * len(batch)


def test_workloads_pass_expected_coordinates(accumulator: Accumulator) -> None:
    noise = ConstantNoise()
    batch = build_coordinate_batch(2)
    noise2d, noise3d, noise4d = list(build_default_registry(noise.suite(), batch, accumulator))

    noise2d.workload()
    assert noise.calls[-1] == (0.5, 0.5)

    noise3d.workload()
    assert noise.calls[-1] == (0.5, 0.5, 0.5)

    noise.calls.clear()
    noise4d.workload()
    assert noise.calls[1] == (0.0, 0.0, 0.5, 0.0)
    assert noise.calls[-1] == (0.5, 0.5, 0.5, 0.5)


def test_accumulator_is_live_after_real_noise_run() -> None:
    accumulator = Accumulator()
    registry = build_default_registry(
        create_noise_suite(42), build_coordinate_batch(8), accumulator
    )

    for entry in registry:
        entry.workload()

    assert accumulator.value != 0.0
    assert accumulator.is_sentinel() is False


def test_accumulator_keeps_accumulating_across_scenarios() -> None:
    noise = ConstantNoise(value=0.5)
    accumulator = Accumulator()
    registry = build_default_registry(noise.suite(), build_coordinate_batch(2), accumulator)
    first, second, _ = list(registry)

    first.workload()
    after_first = accumulator.value
    second.workload()
    first.workload()

    assert after_first == 4.0
    assert accumulator.value == 12.0


def test_accumulator_sentinel_on_overflow() -> None:
    accumulator = Accumulator(1e308)
    accumulator.add(1e308)

    assert accumulator.is_sentinel() is True
