from .base import FixtureSource, SourceError, SourceFailure, SourceResult
from .file_source import FileFixtureSource
from .web_source import FetchError, WebFixtureSource

__all__ = [
    "FetchError",
    "FileFixtureSource",
    "FixtureSource",
    "SourceError",
    "SourceFailure",
    "SourceResult",
    "WebFixtureSource",
]
