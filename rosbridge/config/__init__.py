"""Configuration loading and validation package."""

from .loader import load_bridge_config, load_config_or_default, resolve_config_path
from .models import BridgeConfig, ClockConfig, TelemetryConfig

__all__ = [
    "BridgeConfig",
    "ClockConfig",
    "TelemetryConfig",
    "load_bridge_config",
    "load_config_or_default",
    "resolve_config_path",
]
