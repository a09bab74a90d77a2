"""Loading of the per-environment YAML configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass(frozen=True)
class DatabaseConfig:
    """Database connection settings."""

    dialect: str = ""
    data_source: str = ""


@dataclass(frozen=True)
class Configs:
    """All configuration sections of the application."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)


def _mapping(value, what: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be a mapping")
    return value


def _scalar(section: dict, key: str) -> str:
    value = section.get(key)
    if isinstance(value, (dict, list)):
        raise ValueError(f"configuration key {key!r} must be a scalar")
    return "" if value is None else str(value)


def get_configs(env=None, directory=None) -> Configs:
    """Read ``<directory>/<env>.yml``; ``env`` defaults to ``$ENV_GO``, ``directory`` to ``./config``."""
    if env is None:
        env = os.environ.get("ENV_GO", "")
    path = Path(directory if directory is not None else "config") / f"{env}.yml"
    document = _mapping(yaml.safe_load(path.read_text(encoding="utf-8")), "configuration document")
    section = _mapping(document.get("database"), "configuration section 'database'")
    return Configs(
        database=DatabaseConfig(
            dialect=_scalar(section, "dialect"),
            data_source=_scalar(section, "datasource"),
        )
    )