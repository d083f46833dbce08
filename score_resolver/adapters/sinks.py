"""
Result sinks: write the verdict to a file or to a stream.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

from score_resolver.adapters.abstract import AbstractResultSink
from score_resolver.utils.logging import get_logger

log = get_logger(__name__)


class FileResultSink(AbstractResultSink):
    """
    Save the verdict as a UTF-8 plain text file inside ``output_dir``.

    The file holds exactly the formatted verdict, without a trailing newline.
    ``last_path`` points to the most recently written file.
    """

    name: str = "file"

    def __init__(self, output_dir: Path | str = ".") -> None:
        self._output_dir = Path(output_dir)
        self.last_path: Optional[Path] = None

    def deliver(self, formatted_text: str, suggested_name: str) -> None:
        self._output_dir.mkdir(parents=True, exist_ok=True)
        path = self._output_dir / suggested_name
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(formatted_text)
        self.last_path = path
        log.info("Result saved", extra={"path": str(path)})


class StdoutResultSink(AbstractResultSink):
    """
    Print the verdict on a stream (stdout by default).
    """

    name: str = "stdout"

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def deliver(self, formatted_text: str, suggested_name: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(formatted_text + "\n")
        stream.flush()


__all__ = ["FileResultSink", "StdoutResultSink"]
