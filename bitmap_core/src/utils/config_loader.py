"""Loads YAML/JSON configuration files and global bitmap settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


DEFAULT_MAX_POINT_COUNT = 2**63 - 1


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_meta_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the package's bitmap configuration."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "bitmap_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


META_CONFIG: Dict[str, Any] = load_meta_config()
_LOG_CONF = META_CONFIG.get("logging", {}) or {}
LOG_LEVEL: str = str(_LOG_CONF.get("level", "INFO")).upper()
LOG_FILE: Optional[str] = _LOG_CONF.get("file") or None
MAX_POINT_COUNT: int = int(META_CONFIG.get("max_point_count", DEFAULT_MAX_POINT_COUNT))


def set_log_level(value: str) -> None:
    """Override the log level used for newly configured loggers."""
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    META_CONFIG.setdefault("logging", {})["level"] = LOG_LEVEL


def set_max_point_count(value: int) -> None:
    """Override the largest point count a bitmap may allocate."""
    global MAX_POINT_COUNT
    if value < 0:
        raise ValueError("max_point_count must not be negative")
    MAX_POINT_COUNT = int(value)
    META_CONFIG["max_point_count"] = MAX_POINT_COUNT


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "log_level": LOG_LEVEL,
        "log_file": LOG_FILE or "-",
        "max_point_count": MAX_POINT_COUNT,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
