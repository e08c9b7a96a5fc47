from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final, Mapping, Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL: Final = "http://localhost:1234/v1"
DEFAULT_API_KEY: Final = "lm-studio"
DEFAULT_MODEL: Final = "local-model"
DEFAULT_TIMEOUT_MS: Final = 30_000
DEFAULT_LOG_LEVEL: Final = "info"
DEFAULT_LOG_DIR: Final = "logs"

_ENV_VARS: Final[dict[str, str]] = {
    "base_url": "LM_STUDIO_API_URL",
    "api_key": "LM_STUDIO_API_KEY",
    "model": "LM_STUDIO_MODEL_NAME",
    "timeout_ms": "LM_STUDIO_TIMEOUT",
    "log_level": "LOG_LEVEL",
    "log_dir": "LOG_DIR",
}


def _parse_timeout(raw: Optional[str]) -> int:
    """Milliseconds from *raw*, or the default when missing, malformed or not positive."""
    try:
        value = int(raw) if raw is not None else 0
    except ValueError:
        return DEFAULT_TIMEOUT_MS
    return value if value > 0 else DEFAULT_TIMEOUT_MS


@dataclass(frozen=True, slots=True)
class Settings:
    """Connection and process settings, read once at startup and never mutated."""

    base_url: str = DEFAULT_BASE_URL
    api_key: str = DEFAULT_API_KEY
    model: str = DEFAULT_MODEL
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    log_level: str = DEFAULT_LOG_LEVEL
    log_dir: Optional[str] = DEFAULT_LOG_DIR

    @property
    def timeout(self) -> float:
        """Completion timeout in seconds."""
        return self.timeout_ms / 1000

    @classmethod
    def from_mapping(cls, env: Mapping[str, str]) -> "Settings":
        """Build settings from an environment-like mapping."""
        base_url = env.get(_ENV_VARS["base_url"]) or DEFAULT_BASE_URL
        log_dir = env.get(_ENV_VARS["log_dir"], DEFAULT_LOG_DIR)
        return cls(
            base_url=base_url.rstrip("/"),
            api_key=env.get(_ENV_VARS["api_key"]) or DEFAULT_API_KEY,
            model=env.get(_ENV_VARS["model"]) or DEFAULT_MODEL,
            timeout_ms=_parse_timeout(env.get(_ENV_VARS["timeout_ms"])),
            log_level=env.get(_ENV_VARS["log_level"]) or DEFAULT_LOG_LEVEL,
            log_dir=log_dir or None,
        )

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        """Load ``.env`` (without overriding the process environment) and read settings."""
        load_dotenv(env_file, override=False)
        return cls.from_mapping(os.environ)


__all__ = ["Settings"]
