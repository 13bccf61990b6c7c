from __future__ import annotations

from dataclasses import dataclass, field

from noisebench.accumulator import Accumulator
from noisebench.noise import NoiseSuite


class FakeClock:
    """Deterministic clock: each read returns the current time, then advances by ``step``."""

    def __init__(self, start: float = 0.0, step: float = 1.0) -> None:
        self.now = start
        self.step = step
        self.reads: list[float] = []

    def __call__(self) -> float:
        value = self.now
        self.reads.append(value)
        self.now += self.step
        return value

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class CountingWorkload:
    """Workload that counts invocations and optionally fails on the n-th call."""

    fail_on_call: int | None = None
    calls: int = 0

    def __call__(self) -> None:
        self.calls += 1
        if self.fail_on_call is not None and self.calls == self.fail_on_call:
            raise RuntimeError(f"workload failed on call {self.calls}")


class CountingAccumulator(Accumulator):
    __slots__ = ("adds",)

    def __init__(self) -> None:
        super().__init__()
        self.adds = 0

    def add(self, amount: float) -> None:
        self.adds += 1
        super().add(amount)


@dataclass
class ConstantNoise:
    """Noise stand-in returning a fixed value and recording its arguments."""

    value: float = 1.0
    calls: list[tuple[float, ...]] = field(default_factory=list)

    def __call__(self, *coords: float) -> float:
        self.calls.append(coords)
        return self.value

    def suite(self) -> NoiseSuite:
        return NoiseSuite(noise2=self, noise3=self, noise4=self)
