"""Configuration management for OOP Showcase.

This module centralises all logic related to finding and loading the
configuration file.  The configuration holds the demo line-up: the
notes to play, the band roster and the smell of the car's air
freshener.  It supports both AppData and portable installation modes
and validates JSON against ``schemas/config.schema.json``.

Portable mode is controlled via a ``portable.flag`` file located in the
application directory or by passing ``--portable`` to the CLI.  The
flag file takes precedence over the command line.

Keys missing from the user's ``config.json`` are filled from the
bundled ``default_config.json``, which reproduces the classic walkthrough
(a Lomi piano, an Aloha acoustic, a Gibson electric and a Fender bass).

Example usage::

    from oop_showcase.config_service import ConfigService

    config_service = ConfigService(app_dir=Path(__file__).parent)
    cfg = config_service.load_config()
    cfg["music"] = ["E", "G", "A"]
    config_service.save_config(cfg)

"""

from __future__ import annotations

import json
import os
import platform
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema

PACKAGE_DIR = Path(__file__).resolve().parent


def _get_appdata_root(app_name: str = "OOPShowcase") -> Path:
    """Return the platform-specific base directory for config files."""
    system = platform.system().lower()
    if system == "windows":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / app_name
        return Path.home() / f"AppData/Roaming/{app_name}"
    # On Linux/macOS use XDG_CONFIG_HOME or ~/.config
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / app_name
    return Path.home() / ".config" / app_name


def _load_json(path: Path) -> Any:
    if not path.exists():
        return None
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _save_json(data: Any, file_path: Path) -> None:
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        json.dump(data, f, indent=2)


def _validate_json(data: Any, schema_path: Path) -> None:
    """Validate JSON against a schema, raising ``ValueError`` on failure."""
    schema = _load_json(schema_path)
    if not schema:
        return
    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc.message}")


@dataclass
class ConfigService:
    """Resolve and manage OOP Showcase configuration."""

    app_dir: Path = PACKAGE_DIR
    portable_flag_filename: str = "portable.flag"
    config_filename: str = "config.json"
    defaults_filename: str = "default_config.json"
    schema_dirname: str = "schemas"
    schema_name: str = "config.schema.json"
    _cached_mode: Optional[bool] = field(default=None, init=False, repr=False)

    def _portable_flag_exists(self) -> bool:
        return (self.app_dir / self.portable_flag_filename).exists()

    def detect_mode(self, cli_portable: bool = False) -> bool:
        """Return ``True`` if portable mode should be used.

        Portable mode is selected if a ``portable.flag`` file exists in the
        application directory, or else if ``cli_portable`` is truthy.  The
        result is cached for subsequent calls.
        """
        if self._cached_mode is None:
            if self._portable_flag_exists():
                self._cached_mode = True
            else:
                self._cached_mode = bool(cli_portable)
        return self._cached_mode

    def get_config_dir(self, cli_portable: bool = False) -> Path:
        if self.detect_mode(cli_portable=cli_portable):
            return self.app_dir
        return _get_appdata_root()

    def get_config_path(self, cli_portable: bool = False) -> Path:
        return self.get_config_dir(cli_portable) / self.config_filename

    def get_schema_path(self) -> Path:
        return PACKAGE_DIR / self.schema_dirname / self.schema_name

    def load_defaults(self) -> Dict[str, Any]:
        """Return the bundled default configuration."""
        return _load_json(PACKAGE_DIR / self.defaults_filename) or {}

    def load_config(self, cli_portable: bool = False) -> Dict[str, Any]:
        """Load configuration from the resolved path, merged over the defaults.

        An invalid file is reported with a warning and ignored.
        """
        cfg = self.load_defaults()
        cfg_path = self.get_config_path(cli_portable)
        try:
            data = _load_json(cfg_path)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            print(f"Warning: Could not parse {cfg_path}: {exc}. Falling back to defaults.")
            return cfg
        if data is None:
            return cfg
        try:
            _validate_json(data, self.get_schema_path())
        except ValueError as exc:
            print(f"Warning: {exc}. Falling back to defaults.")
            return cfg
        cfg.update(data)
        return cfg

    def save_config(self, config: Dict[str, Any], cli_portable: bool = False) -> None:
        """Write configuration to disk, validating against the schema first."""
        _validate_json(config, self.get_schema_path())
        _save_json(config, self.get_config_path(cli_portable))
