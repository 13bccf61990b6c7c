"""Seeded simplex noise functions measured by the default scenarios.

The harness never looks inside these; any callables with the same shapes can
be swapped in through ``NoiseSuite``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from opensimplex import OpenSimplex

Noise2 = Callable[[float, float], float]
Noise3 = Callable[[float, float, float], float]
Noise4 = Callable[[float, float, float, float], float]


@dataclass(frozen=True, slots=True)
class NoiseSuite:
    """2D, 3D and 4D noise evaluators sharing one seed."""

    noise2: Noise2
    noise3: Noise3
    noise4: Noise4
    seed: int | None = None


def create_noise_suite(seed: int = 42) -> NoiseSuite:
    """Build the suite from ``opensimplex`` seeded with *seed*."""
    generator = OpenSimplex(seed=seed)
    return NoiseSuite(
        noise2=generator.noise2,
        noise3=generator.noise3,
        noise4=generator.noise4,
        seed=seed,
    )


__all__ = ["Noise2", "Noise3", "Noise4", "NoiseSuite", "create_noise_suite"]
