"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — global CLI flags passed by Click
  2. Env vars     — ``DUMPCTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``dumpctl.toml`` located by :func:`find_config`
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from dumpctl.config.discovery import find_config
from dumpctl.config.models import OutputConfig, PatternsConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an already located TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class DumpSettings(BaseSettings):
    """Frozen settings for one ``dumpctl`` invocation.

    Stored on the :class:`~dumpctl.commands._context.AppContext` at the CLI
    root and read by every dump subcommand.

    Attributes:
        config_path: The TOML file that was loaded, if any.
        output: Defaults for the renderer flags.
        patterns: Saved ``--pattern`` presets per domain.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DUMPCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- global CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    output: OutputConfig = Field(default_factory=OutputConfig)
    patterns: PatternsConfig = Field(default_factory=PatternsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
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
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> DumpSettings:
        """Construct settings for a CLI invocation.

        An explicit *config_path* that does not exist is an error; without
        one the config file is discovered starting at *cwd*. Flags left at
        their unset value are dropped so env vars and TOML can supply them.
        """
        toml_path: Path | None
        if config_path:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                import click

                raise click.ClickException(f"Config file not found: {config_path}")
        else:
            toml_path = find_config(cwd)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **{k: v for k, v in cli_flags.items() if v})
        finally:
            _tls.toml_path = None
