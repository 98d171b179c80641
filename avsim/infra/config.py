"""
Configuration loader - reads the optional YAML settings file that seeds a
console session (log level, size parsing mode, initial signatures).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from avsim.core.errors import ConfigError
from avsim.infra.logging_utils import LOGGER


@dataclass(frozen=True)
class AppConfig:
    log_level: str = "WARNING"
    lenient_sizes: bool = False
    signatures: Tuple[str, ...] = field(default_factory=tuple)
    report_dir: str = "reports"


def load_config(path: Optional[Path] = None) -> AppConfig:
    """
    Load an AppConfig from a YAML file.

    Args:
        path: YAML file to read; ``None`` or a missing file yields defaults

    Returns:
        Validated, immutable configuration
    """
    if path is None:
        return AppConfig()
    path = Path(path)
    if not path.exists():
        LOGGER.warning("Config file not found, using defaults", extra={"extra_data": {"path": str(path)}})
        return AppConfig()

    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"YAML parsing error in {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    config = config_from_mapping(raw if raw is not None else {})
    LOGGER.info("Loaded configuration", extra={"extra_data": {"path": str(path)}})
    return config


def config_from_mapping(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ConfigError("Configuration document must be a mapping")
    known = {f.name for f in fields(AppConfig)}
    unknown = sorted(str(key) for key in raw if key not in known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    if "log_level" in raw:
        level = raw["log_level"]
        if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
            raise ConfigError(f"Invalid log_level: {level!r}")
        values["log_level"] = level.upper()
    if "lenient_sizes" in raw:
        if not isinstance(raw["lenient_sizes"], bool):
            raise ConfigError("lenient_sizes must be true or false")
        values["lenient_sizes"] = raw["lenient_sizes"]
    if "signatures" in raw:
        sigs = raw["signatures"] or []
        if not isinstance(sigs, list) or not all(isinstance(s, str) and s for s in sigs):
            raise ConfigError("signatures must be a list of non-empty strings")
        if len(set(sigs)) != len(sigs):
            raise ConfigError("signatures must not contain duplicates")
        values["signatures"] = tuple(sigs)
    if "report_dir" in raw:
        if not isinstance(raw["report_dir"], str) or not raw["report_dir"]:
            raise ConfigError("report_dir must be a non-empty string")
        values["report_dir"] = raw["report_dir"]
    return AppConfig(**values)
