"""
Error taxonomy for the Round Score Resolver.

Errors come in two shapes:

- ``ResolverError`` is a value. The core returns it instead of raising, so a
  malformed log is an ordinary outcome of a submission.
- ``ContentError`` is an exception raised by content sources at the I/O
  boundary. The submission driver catches it and turns it into the same
  ``ResolverError`` value.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ErrorKind(str, Enum):
    NO_FILE_SELECTED = "no_file_selected"
    UNREADABLE_FILE = "unreadable_file"
    EMPTY_FILE = "empty_file"
    EMPTY_TEXT_FIELD = "empty_text_field"
    INVALID_FORMAT = "invalid_format"
    ROUND_COUNT_MISMATCH = "round_count_mismatch"


_MESSAGES = {
    ErrorKind.NO_FILE_SELECTED: "No file selected.",
    ErrorKind.UNREADABLE_FILE: "Failed to read the file.",
    ErrorKind.EMPTY_FILE: "The selected file is empty.",
    ErrorKind.EMPTY_TEXT_FIELD: "Text field is empty.",
    ErrorKind.INVALID_FORMAT: "Content format is invalid.",
}


class ResolverError(BaseModel):
    """
    A reported, terminal failure of one submission.
    """

    kind: ErrorKind = Field(..., description="Machine-friendly error category.")
    message: str = Field(..., description="User-facing description.")
    expected: Optional[int] = Field(None, description="Declared round count (mismatch only).")
    actual: Optional[int] = Field(None, description="Parsed round count (mismatch only).")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, kind: ErrorKind) -> "ResolverError":
        if kind is ErrorKind.ROUND_COUNT_MISMATCH:
            raise ValueError("use ResolverError.round_count_mismatch(expected, actual)")
        return cls(kind=kind, message=_MESSAGES[kind])

    @classmethod
    def invalid_format(cls) -> "ResolverError":
        return cls.of(ErrorKind.INVALID_FORMAT)

    @classmethod
    def round_count_mismatch(cls, expected: int, actual: int) -> "ResolverError":
        return cls(
            kind=ErrorKind.ROUND_COUNT_MISMATCH,
            message=f"The number of rounds is incorrect: expected: {expected} received: {actual}",
            expected=expected,
            actual=actual,
        )


class ContentError(Exception):
    """Raised by a content source when it cannot deliver any text."""

    def __init__(self, kind: ErrorKind, detail: Optional[str] = None) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(_MESSAGES[kind])

    def to_error(self) -> ResolverError:
        return ResolverError.of(self.kind)


__all__ = ["ErrorKind", "ResolverError", "ContentError"]
