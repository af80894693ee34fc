"""Application configuration loader.

Loads table capacities, identifier offsets and the export destination from
data/config/app_config_v1.yaml. The REGISTRAR_CONFIG environment variable
points to an alternative file. Missing file means built-in defaults.

Usage:
    from registrar.config.app_config import load_app_config

    config = load_app_config()
    config.capacities.students  # 500
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger(__name__)

# Config file path (relative to project root)
CONFIG_FILE = Path("data/config/app_config_v1.yaml")
CONFIG_ENV_VAR = "REGISTRAR_CONFIG"


@dataclass
class CapacityConfig:
    """Maximum number of rows per table."""

    students: int = 500
    courses: int = 100
    enrollments: int = 5000
    log_entries: int = 10000


@dataclass
class IdOffsetConfig:
    """First identifier handed out by each table."""

    students: int = 1001
    courses: int = 5001
    enrollments: int = 7001


@dataclass
class AppConfig:
    """Application-wide configuration."""

    capacities: CapacityConfig = field(default_factory=CapacityConfig)
    id_offsets: IdOffsetConfig = field(default_factory=IdOffsetConfig)
    export_path: Path = Path("system_export.txt")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (same shape as the YAML file)."""
        return {
            "capacities": {
                "students": self.capacities.students,
                "courses": self.capacities.courses,
                "enrollments": self.capacities.enrollments,
                "log_entries": self.capacities.log_entries,
            },
            "id_offsets": {
                "students": self.id_offsets.students,
                "courses": self.id_offsets.courses,
                "enrollments": self.id_offsets.enrollments,
            },
            "export": {"path": str(self.export_path)},
        }


# Module-level cache
_cached_config: AppConfig | None = None


def _get_defaults() -> dict[str, Any]:
    """Get default configuration values."""
    return AppConfig().to_dict()


def _config_path() -> Path:
    """Resolve config file location (env override first)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return CONFIG_FILE


def _parse_config(data: dict[str, Any]) -> AppConfig:
    """Parse configuration dictionary into AppConfig object."""
    defaults = CapacityConfig()
    cap_data = data.get("capacities") or {}
    capacities = CapacityConfig(
        students=int(cap_data.get("students", defaults.students)),
        courses=int(cap_data.get("courses", defaults.courses)),
        enrollments=int(cap_data.get("enrollments", defaults.enrollments)),
        log_entries=int(cap_data.get("log_entries", defaults.log_entries)),
    )

    default_offsets = IdOffsetConfig()
    off_data = data.get("id_offsets") or {}
    id_offsets = IdOffsetConfig(
        students=int(off_data.get("students", default_offsets.students)),
        courses=int(off_data.get("courses", default_offsets.courses)),
        enrollments=int(off_data.get("enrollments", default_offsets.enrollments)),
    )

    export_data = data.get("export") or {}
    export_path = Path(export_data.get("path", "system_export.txt"))

    return AppConfig(
        capacities=capacities,
        id_offsets=id_offsets,
        export_path=export_path,
    )


def load_app_config(force_reload: bool = False) -> AppConfig:
    """Load application config, falling back to defaults.

    Args:
        force_reload: If True, ignore cached config and reload from file.

    Returns:
        AppConfig object with all settings.
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    path = _config_path()
    data: dict[str, Any]

    if path.exists():
        logger.debug("loading_app_config", source=str(path))
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        logger.info("using_default_config", missing=str(path))
        data = _get_defaults()

    _cached_config = _parse_config(data)
    return _cached_config


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when config is modified at runtime.
    """
    global _cached_config
    _cached_config = None
