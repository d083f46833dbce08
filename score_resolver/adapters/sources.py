"""
Content sources: file upload and manual text entry.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from score_resolver.adapters.abstract import AbstractContentSource
from score_resolver.domain.errors import ContentError, ErrorKind
from score_resolver.domain.models import InputMode, SubmissionRequest
from score_resolver.utils.logging import get_logger

log = get_logger(__name__)


class FileContentSource(AbstractContentSource):
    """
    Read the whole log from a file on disk.

    The bytes are decoded as-is; line endings are not translated.
    """

    name: str = "file"

    def __init__(self, path: Optional[Path], encoding: str = "utf-8") -> None:
        self._path = Path(path) if path is not None else None
        self._encoding = encoding

    def read(self) -> str:
        if self._path is None:
            raise ContentError(ErrorKind.NO_FILE_SELECTED)

        try:
            content = self._path.read_bytes().decode(self._encoding)
        except (OSError, UnicodeDecodeError, LookupError) as exc:
            log.warning(
                "Failed to read log file",
                extra={"path": str(self._path), "error": str(exc)},
            )
            raise ContentError(ErrorKind.UNREADABLE_FILE, detail=str(exc)) from exc

        if not content:
            raise ContentError(ErrorKind.EMPTY_FILE, detail=str(self._path))

        log.debug("Read log file", extra={"path": str(self._path), "chars": len(content)})
        return content


class TextContentSource(AbstractContentSource):
    """
    Deliver manually entered text as-is.

    Text that is empty or whitespace only is rejected; anything else is
    passed through untrimmed.
    """

    name: str = "manual"

    def __init__(self, text: str) -> None:
        self._text = text

    def read(self) -> str:
        if self._text.strip() == "":
            raise ContentError(ErrorKind.EMPTY_TEXT_FIELD)
        return self._text


def build_source(request: SubmissionRequest, encoding: str = "utf-8") -> AbstractContentSource:
    """Pick the content source matching the request's input mode."""
    if request.mode is InputMode.MANUAL:
        return TextContentSource(request.text)
    return FileContentSource(request.file_path, encoding=encoding)


__all__ = ["FileContentSource", "TextContentSource", "build_source"]
