"""
Adapters package for the Round Score Resolver.

Re-exports the collaborator interfaces together with the concrete content
sources and result sinks so callers can import from `score_resolver.adapters`.
"""

from score_resolver.adapters.abstract import (
    AbstractContentSource,
    AbstractResultSink,
    ContentSource,
    ResultSink,
)
from score_resolver.adapters.sinks import FileResultSink, StdoutResultSink
from score_resolver.adapters.sources import FileContentSource, TextContentSource, build_source

__all__ = [
    # Interfaces
    "AbstractContentSource",
    "AbstractResultSink",
    "ContentSource",
    "ResultSink",
    # Sources
    "FileContentSource",
    "TextContentSource",
    "build_source",
    # Sinks
    "FileResultSink",
    "StdoutResultSink",
]
