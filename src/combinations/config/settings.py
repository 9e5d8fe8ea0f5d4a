"""Configuration settings and loading."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from combinations.errors import ConfigValidationError, ErrorContext

VALID_STRATEGIES = ("recursive", "iterative", "enumerator")


class CombinationsConfig(BaseSettings):
    """Configuration for the combinations command line driver."""

    model_config = SettingsConfigDict(
        env_prefix="COMBINATIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    n: int = Field(default=16, description="Size of the base set 0..n-1")
    m: int = Field(default=4, description="Size of the subsets")
    limit: int = Field(default=1_000_000, description="Largest count that will be generated")
    strategy: str = "recursive"
    print_combinations: bool = False
    bits: int | None = Field(default=64, description="Counter width; None for unbounded")
    verbose: bool = False
    strict_exit: bool = False

    @field_validator("n", "m", "limit", mode="before")
    @classmethod
    def validate_non_negative(cls, v: Any, info: ValidationInfo) -> Any:
        if isinstance(v, int) and v < 0:
            raise ConfigValidationError(
                message=f"{info.field_name} must be non-negative, got {v}",
                field=info.field_name,
                value=v,
            )
        return v

    @field_validator("strategy", mode="before")
    @classmethod
    def validate_strategy(cls, v: str) -> str:
        if v not in VALID_STRATEGIES:
            raise ConfigValidationError(
                message=f"Invalid strategy: {v!r}. Valid: {VALID_STRATEGIES}",
                field="strategy",
                value=v,
                context=ErrorContext(extra={"valid_strategies": list(VALID_STRATEGIES)}),
            )
        return v

    @field_validator("bits", mode="before")
    @classmethod
    def validate_bits(cls, v: Any) -> Any:
        if isinstance(v, int) and v < 1:
            raise ConfigValidationError(
                message=f"bits must be positive, got {v}",
                field="bits",
                value=v,
            )
        return v


def load_config(config_path: str | Path | None = None) -> CombinationsConfig:
    """Load configuration from file and environment.

    Priority: CLI args > env vars > config file > defaults
    """
    config_data: dict[str, Any] = {}

    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path) as f:
                config_data = yaml.safe_load(f) or {}
            if not isinstance(config_data, dict):
                raise ConfigValidationError(
                    message=f"Configuration must be a YAML mapping, got {type(config_data).__name__}",
                    context=ErrorContext(extra={"path": str(config_path)}),
                )

    config_data.update(_get_env_overrides())

    return CombinationsConfig(**config_data)


def _get_env_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: dict[str, Any] = {}

    def _flag(x: str) -> bool:
        return x.lower() in ("true", "1", "yes")

    env_mappings = {
        "COMBINATIONS_N": ("n", int),
        "COMBINATIONS_M": ("m", int),
        "COMBINATIONS_LIMIT": ("limit", int),
        "COMBINATIONS_STRATEGY": "strategy",
        "COMBINATIONS_BITS": ("bits", lambda x: None if x.lower() == "none" else int(x)),
        "COMBINATIONS_VERBOSE": ("verbose", _flag),
        "COMBINATIONS_STRICT_EXIT": ("strict_exit", _flag),
    }

    for env_key, config_key in env_mappings.items():
        value = os.environ.get(env_key)
        if value is not None:
            if isinstance(config_key, tuple):
                key, converter = config_key
                overrides[key] = converter(value)
            else:
                overrides[config_key] = value

    return overrides
