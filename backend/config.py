"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

DEFAULT_CORS_ORIGINS: Tuple[str, ...] = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


class ConfigError(ValueError):
    """Raised when an environment override cannot be parsed."""


@dataclass(frozen=True)
class Settings:
    cors_origins: Tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    log_level: str = "INFO"
    log_json: bool = False

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        prefix: str = "COMPOUND_",
    ) -> "Settings":
        """
        Build settings from ``{prefix}CORS_ORIGINS``, ``{prefix}LOG_LEVEL`` and
        ``{prefix}LOG_JSON``. Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        updates: dict = {}

        origins = env.get(f"{prefix}CORS_ORIGINS")
        if origins is not None:
            parsed = tuple(o.strip() for o in origins.split(",") if o.strip())
            if not parsed:
                raise ConfigError(f"{prefix}CORS_ORIGINS must list at least one origin")
            updates["cors_origins"] = parsed

        level = env.get(f"{prefix}LOG_LEVEL")
        if level is not None:
            normalized = level.strip().upper()
            if normalized not in _LOG_LEVELS:
                raise ConfigError(f"{prefix}LOG_LEVEL has unknown level {level!r}")
            updates["log_level"] = normalized

        log_json = env.get(f"{prefix}LOG_JSON")
        if log_json is not None:
            updates["log_json"] = _parse_bool(f"{prefix}LOG_JSON", log_json)

        return cls(**updates)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {raw!r}")
