import os
from dataclasses import dataclass, fields
from functools import lru_cache
from typing import List, Optional

INVALID_FIXTURE_POLICIES = ("skip", "abort")

# Settings field -> environment variable, used for error messages in require().
ENV_NAMES = {
    "app_name": "APP_NAME",
    "env": "ENV",
    "log_level": "LOG_LEVEL",
    "log_file": "LOG_FILE",
    "fixtures_files": "FIXTURES_FILES",
    "fixtures_urls": "FIXTURES_URLS",
    "standings_dir": "STANDINGS_DIR",
    "fetch_timeout_seconds": "FETCH_TIMEOUT_SECONDS",
    "invalid_fixture_policy": "INVALID_FIXTURE_POLICY",
}


class ConfigError(RuntimeError):
    """Raised when a required configuration value is missing or invalid."""


def _split_env(value: Optional[str]) -> List[str]:
    """Split a space-separated environment value; empty or unset -> []."""
    if not value:
        return []
    return [part for part in value.split() if part]


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw.strip())
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigError(f"{name} must be > 0, got {raw!r}")
    return value


def _policy_env(name: str, default: str) -> str:
    value = (os.environ.get(name) or default).strip().lower()
    if value not in INVALID_FIXTURE_POLICIES:
        raise ConfigError(f"{name} must be one of {', '.join(INVALID_FIXTURE_POLICIES)}; got {value!r}")
    return value


@dataclass
class Settings:
    """Application settings loaded from environment variables with safe defaults."""

    app_name: str = "League Tables"
    env: str = "dev"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    fixtures_files: Optional[List[str]] = None
    fixtures_urls: Optional[List[str]] = None
    standings_dir: Optional[str] = None
    fetch_timeout_seconds: float = 5.0
    invalid_fixture_policy: str = "skip"

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from environment variables."""
        return cls(
            app_name=os.getenv("APP_NAME", cls.app_name),
            env=os.getenv("ENV", cls.env),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            log_file=(os.getenv("LOG_FILE") or "").strip() or None,
            fixtures_files=_split_env(os.getenv("FIXTURES_FILES")) or None,
            fixtures_urls=_split_env(os.getenv("FIXTURES_URLS")) or None,
            standings_dir=(os.getenv("STANDINGS_DIR") or "").strip() or None,
            fetch_timeout_seconds=_float_env("FETCH_TIMEOUT_SECONDS", cls.fetch_timeout_seconds),
            invalid_fixture_policy=_policy_env("INVALID_FIXTURE_POLICY", cls.invalid_fixture_policy),
        )

    def require(self, name: str):
        """Return the named setting, raising ConfigError if it is unset or empty."""
        if name not in {f.name for f in fields(self)}:
            raise KeyError(f"Unknown setting: {name}")
        value = getattr(self, name)
        if value is None or value == "" or value == []:
            env_name = ENV_NAMES.get(name, name.upper())
            raise ConfigError(f"Configuration value {env_name} is required but not set")
        return value


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings.from_env()
