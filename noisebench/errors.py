"""Exception types raised by the harness itself.

Failures raised by a workload or the function under test are never wrapped;
they reach the caller unchanged.
"""

from __future__ import annotations


class NoiseBenchError(Exception):
    """Base class for harness-level errors."""


class ConfigurationError(NoiseBenchError, ValueError):
    """Raised when the engine is handed an unusable warm-up count or budget."""


__all__ = ["ConfigurationError", "NoiseBenchError"]
