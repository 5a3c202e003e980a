"""Config file discovery and loading.

Lookup order: ``DUMPCTL_CONFIG`` env var, then a walk up from the working
directory for ``dumpctl.toml`` (the way git finds ``.git/``), then the
per-user file under ``~/.config/dumpctl/``.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from dumpctl.config.models import DumpConfig

CONFIG_FILENAME = "dumpctl.toml"
CONFIG_ENV_VAR = "DUMPCTL_CONFIG"


def user_config_path() -> Path:
    """Per-user fallback location."""
    return Path.home() / ".config" / "dumpctl" / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Locate the config file, or None if there is none.

    An env var pointing at a missing file disables discovery entirely.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

    fallback = user_config_path()
    return fallback if fallback.is_file() else None


def load_config(path: Path | None = None, cwd: Path | None = None) -> DumpConfig:
    """Load and validate config from a TOML file.

    Returns the default ``DumpConfig`` if no file is found.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return DumpConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return DumpConfig.model_validate(data)
