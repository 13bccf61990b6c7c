"""Micro-benchmark harness for coordinate-to-scalar noise functions.

Runs each registered scenario through a warm-up phase and a fixed-duration
count-until-deadline loop, then projects the raw counts into throughput and
latency figures suitable for pasting into documentation.
"""

from noisebench.accumulator import Accumulator
from noisebench.engine import BenchmarkRunner, RawResult, ScenarioOutcome, measure
from noisebench.errors import ConfigurationError, NoiseBenchError
from noisebench.registry import Scenario, ScenarioRegistry
from noisebench.report import DerivedResult, derive

__all__ = [
    "Accumulator",
    "BenchmarkRunner",
    "ConfigurationError",
    "DerivedResult",
    "NoiseBenchError",
    "RawResult",
    "Scenario",
    "ScenarioOutcome",
    "ScenarioRegistry",
    "derive",
    "measure",
]
