"""Configuration package for the registrar."""

from registrar.config.app_config import (
    AppConfig,
    CapacityConfig,
    IdOffsetConfig,
    clear_config_cache,
    load_app_config,
)
from registrar.config.logging_setup import configure_logging

__all__ = [
    "AppConfig",
    "CapacityConfig",
    "IdOffsetConfig",
    "clear_config_cache",
    "configure_logging",
    "load_app_config",
]
