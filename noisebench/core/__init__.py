"""Core module: lightweight re-exports only."""

from noisebench.core.logging import scenario_scope, setup_logging

__all__ = ["scenario_scope", "setup_logging"]
