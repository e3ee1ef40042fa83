"""Persisted tsvmat settings.

Settings live in a small JSON document. Only ``log_level`` is read today;
unknown keys are preserved when the file is rewritten.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_LOG_LEVEL = "WARNING"


def config_dir() -> Path:
    raw = os.environ.get("TSVMAT_CONFIG_DIR")
    if raw and raw.strip():
        return Path(raw).expanduser()
    return Path.home() / ".tsvmat"


def config_path(config_file: Optional[os.PathLike[str] | str] = None) -> Path:
    """Resolve the settings file.

    An explicit ``config_file`` wins, then ``TSVMAT_CONFIG``, then
    ``config.json`` inside :func:`config_dir`.
    """

    if config_file is not None:
        return Path(config_file)
    raw = os.environ.get("TSVMAT_CONFIG")
    if raw and raw.strip():
        return Path(raw).expanduser()
    return config_dir() / "config.json"


def load_config(config_file: Optional[os.PathLike[str] | str] = None) -> Dict[str, Any]:
    """Return the stored settings; a missing or unreadable file reads as ``{}``."""

    path = config_path(config_file)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(
    config: Dict[str, Any],
    config_file: Optional[os.PathLike[str] | str] = None,
) -> Path:
    path = config_path(config_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return path


def level_name(level: str | int) -> str:
    """Normalise ``level`` to a registered level name.

    Raises
    ------
    ValueError
        If ``level`` is not a known logging level.
    """

    if isinstance(level, int):
        name = logging.getLevelName(level)
        if isinstance(name, str) and not name.startswith("Level "):
            return name
        raise ValueError(f"Unknown logging level: {level!r}")

    name = str(level).strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    raise ValueError(f"Unknown logging level: {level!r}")


def load_log_level(config_file: Optional[os.PathLike[str] | str] = None) -> int:
    """Return the numeric level to log at, defaulting to ``WARNING``."""

    value = load_config(config_file).get("log_level", DEFAULT_LOG_LEVEL)
    try:
        name = level_name(value)
    except ValueError:
        name = DEFAULT_LOG_LEVEL
    return logging.getLevelName(name)


def save_log_level(
    level: str | int,
    config_file: Optional[os.PathLike[str] | str] = None,
) -> Path:
    config = load_config(config_file)
    config["log_level"] = level_name(level)
    return save_config(config, config_file)


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "config_dir",
    "config_path",
    "load_config",
    "save_config",
    "level_name",
    "load_log_level",
    "save_log_level",
]
