"""Per-project toolkata configuration (.toolkata/config.json).

Resolution order for each key (first match wins):

1. Environment variable (``TOOLKATA_LOG_LEVEL``, ``TOOLKATA_SEARCH_LIMIT``).
2. ``.toolkata/config.json`` found by walking up from the working directory.
3. Built-in defaults.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

CONFIG_DIR = ".toolkata"
CONFIG_NAME = "config.json"

DEFAULTS: dict[str, Any] = {
    "include_coming_soon": True,
    "search_limit": 0,
    "log_level": "WARNING",
}

_ENV_OVERRIDES = {
    "log_level": "TOOLKATA_LOG_LEVEL",
    "search_limit": "TOOLKATA_SEARCH_LIMIT",
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def find_project_root(start: str = ".") -> Path:
    """Walk up from *start* looking for a .toolkata directory or a .git root.

    Falls back to *start* itself.
    """
    start_path = Path(start).resolve()
    current = start_path
    while current != current.parent:
        if (current / CONFIG_DIR).is_dir() or (current / ".git").exists():
            return current
        current = current.parent
    return start_path


def config_path(project_root: Path) -> Path:
    return project_root / CONFIG_DIR / CONFIG_NAME


def _load_project_config(project_root: Path) -> dict:
    """Read .toolkata/config.json; empty dict if missing or unreadable."""
    path = config_path(project_root)
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        log.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        log.warning("Ignoring config %s: expected a JSON object", path)
        return {}
    return data


def load_config(project_root: Path | None = None) -> dict[str, Any]:
    """Return the effective configuration.

    Unknown keys in the file are ignored.  Raises ValueError when a known
    key has a value of the wrong type.
    """
    if project_root is None:
        project_root = find_project_root()
    cfg = dict(DEFAULTS)
    file_cfg = _load_project_config(project_root)
    for key in DEFAULTS:
        if key in file_cfg:
            cfg[key] = file_cfg[key]
    for key, env_name in _ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw:
            cfg[key] = _coerce_env(key, raw, env_name)
    _validate_config(cfg)
    return cfg


def _coerce_env(key: str, raw: str, env_name: str) -> Any:
    if key == "search_limit":
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"{env_name} must be an integer, got {raw!r}") from None
    return raw


def _validate_config(cfg: dict[str, Any]) -> None:
    """Raise ValueError if any known key has an invalid value."""
    if not isinstance(cfg["include_coming_soon"], bool):
        raise ValueError("'include_coming_soon' must be true or false")
    limit = cfg["search_limit"]
    if not isinstance(limit, int) or isinstance(limit, bool) or limit < 0:
        raise ValueError("'search_limit' must be a non-negative integer")
    level = cfg["log_level"]
    if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
        raise ValueError(f"'log_level' must be one of {sorted(_LOG_LEVELS)}")
    cfg["log_level"] = level.upper()
