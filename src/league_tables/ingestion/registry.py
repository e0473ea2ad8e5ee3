"""
Source registry: build a fixture source by name from settings.

No side effects; nothing is read or fetched at construction.
"""

from __future__ import annotations

from typing import Callable, Dict

from league_tables.core.config import Settings

from .connectors.base import FixtureSource
from .connectors.file_source import FileFixtureSource
from .connectors.web_source import WebFixtureSource

SourceFactory = Callable[[Settings], FixtureSource]


def _file_source(settings: Settings) -> FixtureSource:
    return FileFixtureSource(settings.require("fixtures_files"))


def _web_source(settings: Settings) -> FixtureSource:
    return WebFixtureSource(settings.require("fixtures_urls"), timeout=settings.fetch_timeout_seconds)


_REGISTRY: Dict[str, SourceFactory] = {
    "file": _file_source,
    "web": _web_source,
}


def get_source(name: str, settings: Settings) -> FixtureSource:
    """Build the source registered under name. Raises KeyError if unknown, ConfigError if unconfigured."""
    if name not in _REGISTRY:
        raise KeyError(f"Unknown source: {name}")
    return _REGISTRY[name](settings)


def register_source(name: str, factory: SourceFactory) -> None:
    """Register a source factory by name (for tests or future extensions)."""
    _REGISTRY[name] = factory


def list_source_names() -> list[str]:
    return list(_REGISTRY.keys())
