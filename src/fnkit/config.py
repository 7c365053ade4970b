"""Configuration utilities for the :mod:`fnkit` example runner."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Sequence

import yaml

from .examples import EXAMPLES


@dataclass
class LoggingConfig:
    """Logging verbosity and formatting options."""

    level: str = "INFO"
    rich_tracebacks: bool = True


@dataclass
class ExamplesConfig:
    """Selection of worked examples to run, in execution order."""

    names: List[str] = field(default_factory=lambda: list(EXAMPLES))


@dataclass
class AppConfig:
    """Top-level configuration object composed of sub-configurations."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    examples: ExamplesConfig = field(default_factory=ExamplesConfig)


def validate_example_names(names: Sequence[str]) -> List[str]:
    """Return ``names`` as a list, raising if any is not a known example."""

    unknown = [name for name in names if name not in EXAMPLES]
    if unknown:
        raise ValueError(f"Unknown example(s) {unknown}; expected a subset of {list(EXAMPLES)}")
    return list(names)


def load_yaml(path: Path) -> Mapping[str, Any]:
    """Load a YAML document and return a mapping."""

    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle)
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"{path}: expected a mapping at the top level, got {type(raw).__name__}")
    return raw


def parse_app_config(raw: Mapping[str, Any]) -> AppConfig:
    """Build :class:`AppConfig` from an already-parsed mapping."""

    logging_cfg = raw.get("logging") or {}
    examples_cfg = raw.get("examples") or {}

    names = examples_cfg.get("names")
    return AppConfig(
        logging=LoggingConfig(
            level=str(logging_cfg.get("level", "INFO")),
            rich_tracebacks=bool(logging_cfg.get("rich_tracebacks", True)),
        ),
        examples=ExamplesConfig(
            names=list(EXAMPLES) if names is None else validate_example_names([str(n) for n in names]),
        ),
    )


def load_app_config(path: Path) -> AppConfig:
    """Load :class:`AppConfig` from ``path``."""

    return parse_app_config(load_yaml(path))


__all__ = [
    "LoggingConfig",
    "ExamplesConfig",
    "AppConfig",
    "validate_example_names",
    "load_yaml",
    "parse_app_config",
    "load_app_config",
]
