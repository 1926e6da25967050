"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — global CLI flags passed by Click
  2. Env vars     — ``PROJDEPS_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``projdeps.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

The scan root itself is not a setting: every command takes it through
``--path`` and validates it separately.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from projdeps.config.discovery import find_config, read_config
from projdeps.config.models import ScanConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``projdeps.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = read_config(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class ProjdepsSettings(BaseSettings):
    """Frozen settings object stored on the CLI context.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        verbose: Emit DEBUG logs.
        log_json: Render logs as JSON lines.
        scan: Project-file discovery options.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PROJDEPS_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    scan: ScanConfig = Field(default_factory=ScanConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> ProjdepsSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when it names an existing file, otherwise
        discovers ``projdeps.toml`` by walking up from *start* (default:
        cwd). CLI flags override everything else.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
