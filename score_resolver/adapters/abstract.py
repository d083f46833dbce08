"""
Collaborator interfaces for the Round Score Resolver.

Content sources deliver the raw log text; result sinks receive the formatted
verdict. The core never sees either: the submission pipeline reads from a
source, resolves the text and hands the result to a sink.
"""

from __future__ import annotations

import abc
from typing import Protocol, runtime_checkable


@runtime_checkable
class ContentSource(Protocol):
    """
    Anything that can deliver one complete raw log.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier used in logs.
    """

    name: str

    def read(self) -> str:
        """
        Return the complete raw log.

        Raises
        ------
        ContentError
            When no content can be delivered (nothing selected, unreadable
            or empty input).
        """
        ...


@runtime_checkable
class ResultSink(Protocol):
    """
    Anything that can present or persist a formatted verdict.
    """

    name: str

    def deliver(self, formatted_text: str, suggested_name: str) -> None:
        """
        Present or persist ``formatted_text``.

        Parameters
        ----------
        formatted_text : str
            The formatted verdict, e.g. ``"2 17"``.
        suggested_name : str
            File name a persisting sink should use, e.g. ``"output.txt"``.
        """
        ...


class AbstractContentSource(abc.ABC):
    """
    Optional ABC helper for class-based content sources.
    """

    name: str

    @abc.abstractmethod
    def read(self) -> str:  # pragma: no cover - interface only
        """Return the complete raw log or raise ContentError."""
        raise NotImplementedError


class AbstractResultSink(abc.ABC):
    """
    Optional ABC helper for class-based result sinks.
    """

    name: str

    @abc.abstractmethod
    def deliver(self, formatted_text: str, suggested_name: str) -> None:  # pragma: no cover
        """Present or persist the formatted verdict."""
        raise NotImplementedError


__all__ = [
    "ContentSource",
    "ResultSink",
    "AbstractContentSource",
    "AbstractResultSink",
]
