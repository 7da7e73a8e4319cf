"""Runtime settings for the command line, read from the environment."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Mapping

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_YAML_SUFFIXES = (".yaml", ".yml")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when command line settings are invalid."""


def parse_log_level(raw: str) -> int:
    """Translate a level name such as ``info`` into its ``logging`` constant."""
    name = raw.strip().upper()
    if name not in _LOG_LEVELS:
        raise ConfigError(f"log level must be one of {', '.join(_LOG_LEVELS)}, got {raw!r}")
    return getattr(logging, name)


@dataclass(frozen=True)
class CliConfig:
    """Settings for ``plainschema`` runs."""

    log_level: int = logging.WARNING
    yaml_suffixes: tuple[str, ...] = DEFAULT_YAML_SUFFIXES

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "CliConfig":
        source = os.environ if env is None else env
        log_level = parse_log_level(source.get("PLAINSCHEMA_LOG_LEVEL", DEFAULT_LOG_LEVEL))

        raw_suffixes = source.get("PLAINSCHEMA_YAML_SUFFIXES", "").strip()
        if raw_suffixes:
            yaml_suffixes = tuple(
                _normalize_suffix(part) for part in raw_suffixes.split(",") if part.strip()
            )
        else:
            yaml_suffixes = DEFAULT_YAML_SUFFIXES
        return cls(log_level=log_level, yaml_suffixes=yaml_suffixes)


def _normalize_suffix(raw: str) -> str:
    suffix = raw.strip().lower()
    return suffix if suffix.startswith(".") else f".{suffix}"
