"""
Domain package for the Round Score Resolver.

Exports the data models and the error taxonomy shared by the core stages,
the adapters and the CLI. Keep this package focused on data definitions.
"""

from score_resolver.domain.errors import ContentError, ErrorKind, ResolverError
from score_resolver.domain.models import (
    InputMode,
    LogLines,
    Resolution,
    Round,
    SubmissionRequest,
    Verdict,
)

__all__ = [
    "ContentError",
    "ErrorKind",
    "InputMode",
    "LogLines",
    "Resolution",
    "ResolverError",
    "Round",
    "SubmissionRequest",
    "Verdict",
]
