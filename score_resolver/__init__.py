"""
Round Score Resolver - winner resolution for two-party multi-round game logs.

A game log declares its round count on the first line and lists one round per
following line, each with both parties' scores. The winner is the party with
the largest margin in any single round. This package provides:

- Format validation and loose round parsing
- The winner scan and the ``"<winner> <margin>"`` result format
- File and manual-text content sources, file and stdout result sinks
- A typer CLI with structured logging
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from score_resolver.config import Settings, get_settings
from score_resolver.domain import (
    ContentError,
    ErrorKind,
    InputMode,
    Resolution,
    ResolverError,
    Round,
    SubmissionRequest,
    Verdict,
)
from score_resolver.pipeline import resolve_log, submit
from score_resolver.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Pipeline
    "resolve_log",
    "submit",
    # Domain
    "ContentError",
    "ErrorKind",
    "InputMode",
    "Resolution",
    "ResolverError",
    "Round",
    "SubmissionRequest",
    "Verdict",
    # Logging
    "configure_logging",
    "get_logger",
]
