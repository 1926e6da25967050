"""Config file discovery.

Walk-up finder locates projdeps.toml from the working directory, the same
way git finds .git/. ``PROJDEPS_CONFIG`` and ``--config`` take precedence.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "projdeps.toml"
CONFIG_ENV_VAR = "PROJDEPS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest projdeps.toml at or above *start* (default: cwd).

    An explicit ``PROJDEPS_CONFIG`` wins; if it names a missing file no
    config is used at all.
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
    return None


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse *path* as TOML; a missing path yields an empty mapping."""
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
