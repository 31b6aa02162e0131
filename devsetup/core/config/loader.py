"""
Configuration loader — reads the installer config into ``InstallerConfig``.

Sources, later wins:

    1. model defaults
    2. YAML file (explicit path, $DEVSETUP_CONFIG, or the XDG default)
    3. DEVSETUP_<FIELD> environment variables

A missing default config file is fine; a missing *explicit* one is not.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from devsetup.core.models.settings import InstallerConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DEVSETUP_CONFIG"
ENV_PREFIX = "DEVSETUP_"
DEFAULT_CONFIG_FILE = Path("~/.config/devsetup/config.yml")


class ConfigError(Exception):
    """Raised when installer configuration is invalid or missing."""


def find_config_file(environ: Mapping[str, str] | None = None) -> Path | None:
    """Locate the config file without reading it.

    Returns the ``$DEVSETUP_CONFIG`` path when set, else the XDG default
    if it exists, else None.
    """
    env = os.environ if environ is None else environ
    explicit = env.get(CONFIG_ENV_VAR)
    if explicit:
        return Path(explicit).expanduser()

    default = DEFAULT_CONFIG_FILE.expanduser()
    if default.is_file():
        return default
    return None


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading installer config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Allow the settings to sit under a top-level "devsetup" key
    section = data.get("devsetup", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected 'devsetup' to be a mapping in {path}")
    return dict(section)


def _env_overrides(environ: Mapping[str, str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for field in InstallerConfig.model_fields:
        value = environ.get(f"{ENV_PREFIX}{field.upper()}")
        if value:
            overrides[field] = value
    return overrides


def load_config(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> InstallerConfig:
    """Load and validate installer configuration.

    Args:
        path: Explicit config file. If None, ``find_config_file()`` decides.
        environ: Environment to read overrides from (default: os.environ).

    Returns:
        Validated InstallerConfig.

    Raises:
        ConfigError: If the file is unreadable or a value is invalid.
    """
    env = os.environ if environ is None else environ

    if path is None:
        path = find_config_file(env)

    data: dict[str, Any] = _read_yaml(path) if path is not None else {}

    unknown = sorted(set(data) - set(InstallerConfig.model_fields))
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    data.update(_env_overrides(env))

    try:
        config = InstallerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid installer configuration: {e}") from e

    logger.info("Target Go %s under %s", config.go_version, config.install_path)
    return config
