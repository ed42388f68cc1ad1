"""Configuration models and loader utilities."""

from __future__ import annotations

import dataclasses
import pathlib
from dataclasses import dataclass, field
from typing import Any, Dict

import yaml

DEGENERATE_POLICIES = ("passthrough", "skip")


@dataclass(slots=True)
class ReadingConfig:
    max_symbols: int = 40


@dataclass(slots=True)
class ProcessingConfig:
    workers: int = 1
    on_degenerate: str = "passthrough"
    input_encoding: str = "utf-8-sig"
    output_encoding: str = "utf-8"


@dataclass(slots=True)
class NormalizeConfig:
    reading: ReadingConfig = field(default_factory=ReadingConfig)
    processing: ProcessingConfig = field(default_factory=ProcessingConfig)


def load_config(path: pathlib.Path) -> NormalizeConfig:
    """Load configuration from a YAML file."""
    with path.open("r", encoding="utf-8") as handle:
        data: Dict[str, Any] = yaml.safe_load(handle) or {}
    return apply_overrides(NormalizeConfig(), data)


def apply_overrides(config: NormalizeConfig, overrides: Dict[str, Any]) -> NormalizeConfig:
    """Apply dictionary overrides recursively to a configuration object."""

    def merge(target: Any, src: Dict[str, Any]) -> Any:
        if dataclasses.is_dataclass(target):
            for key, value in src.items():
                if not hasattr(target, key):
                    raise KeyError(f"Unknown configuration key: {key}")
                attr = getattr(target, key)
                if dataclasses.is_dataclass(attr) and isinstance(value, dict):
                    merge(attr, value)
                else:
                    setattr(target, key, value)
            return target
        raise TypeError("Target must be a dataclass instance")

    merge(config, overrides)
    return config


def validate_config(config: NormalizeConfig) -> None:
    """Validate logical invariants of the normalizer configuration."""
    if config.reading.max_symbols <= 0:
        raise ValueError("Maximum symbols per line must be positive")
    if config.processing.workers < 1:
        raise ValueError("At least one worker is required")
    if config.processing.on_degenerate not in DEGENERATE_POLICIES:
        raise ValueError(
            f"Unknown degenerate-duration policy {config.processing.on_degenerate!r}; "
            f"expected one of {', '.join(DEGENERATE_POLICIES)}"
        )
