"""YAML loader for the config subsystem.

The file is a single mapping with optional ``clock`` and ``telemetry``
sections; see ``config/rosbridge.yml`` for an annotated example.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from rosbridge.core.errors import ConfigurationError

from .models import BridgeConfig

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config") / "rosbridge.yml"
CONFIG_ENV_VAR = "ROSBRIDGE_CONFIG"


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"YAML root must be a mapping in {path}")
    return data


def load_bridge_config(path: Path | str = DEFAULT_CONFIG_PATH) -> BridgeConfig:
    """Load and validate a config file into :class:`BridgeConfig`."""

    path = Path(path)
    data = _read_yaml(path)
    try:
        config = BridgeConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration in {path}: {exc}") from exc
    LOGGER.debug("Loaded configuration", extra={"config_path": str(path)})
    return config


def resolve_config_path(explicit: Path | str | None = None) -> Path | None:
    """Pick the config file: explicit argument, then env var, then default.

    Returns ``None`` when nothing was requested and the default file does not
    exist, in which case callers fall back to built-in defaults.
    """

    if explicit:
        return Path(explicit)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None


def load_config_or_default(explicit: Path | str | None = None) -> BridgeConfig:
    path = resolve_config_path(explicit)
    if path is None:
        return BridgeConfig()
    return load_bridge_config(path)
