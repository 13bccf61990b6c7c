from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    json_output: bool = False


class BenchSettings(BaseSettings):
    """Startup constants for one benchmark run.

    The defaults reproduce the reference run: 1000 warm-up iterations,
    a 10 second budget per scenario and an 8x8x8 coordinate grid
    (512 noise calls per iteration) seeded with 42.
    """

    warmup_iterations: int = Field(default=1000, ge=0)
    duration_s: float = Field(default=10.0, gt=0, allow_inf_nan=False)
    grid_size: int = Field(default=8, ge=1)
    seed: int = 42
    max_iterations: int | None = Field(default=None, ge=1)
    """Optional safety cap on timed iterations; ``None`` disables it."""
    continue_on_error: bool = False
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="NOISEBENCH_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # NOISEBENCH_* variables win over values read from a config file,
        # which arrive as init kwargs via load_config().
        return env_settings, init_settings, file_secret_settings

    @property
    def batch_size(self) -> int:
        """Number of noise calls folded into one workload invocation."""
        return self.grid_size**3


def load_config(path: str | Path = "config/noisebench.yaml") -> BenchSettings:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"config file not found: {config_path}")

    loaded = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(loaded, dict):
        raise ValueError("config file must contain a top-level mapping")

    raw = loaded.get("noisebench", loaded)
    if not isinstance(raw, dict):
        raise ValueError("noisebench config section must be a mapping")

    return BenchSettings(**raw)


__all__ = [
    "BenchSettings",
    "LoggingConfig",
    "load_config",
]
