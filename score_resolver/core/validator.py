"""
Format validator: structural checks on the raw log before any scoring.
"""

from __future__ import annotations

from typing import Union

from score_resolver.config import MAX_DECLARED_ROUNDS
from score_resolver.core.parser import parse_leading_int
from score_resolver.domain.errors import ResolverError
from score_resolver.domain.models import LogLines
from score_resolver.utils.logging import get_logger

log = get_logger(__name__)


def validate(raw_text: str, max_rounds: int = MAX_DECLARED_ROUNDS) -> Union[LogLines, ResolverError]:
    """
    Split ``raw_text`` into lines and check the header.

    Parameters
    ----------
    raw_text : str
        Complete log as delivered by a content source.
    max_rounds : int
        Largest declared round count accepted (inclusive).

    Returns
    -------
    LogLines | ResolverError
        The split log, or an ``INVALID_FORMAT`` error when there are fewer than
        two lines, the header has no leading integer, or the declared count
        exceeds ``max_rounds``.
    """
    lines = raw_text.split("\n")
    if len(lines) < 2:
        log.debug("Rejected log with fewer than two lines", extra={"lines": len(lines)})
        return ResolverError.invalid_format()

    declared = parse_leading_int(lines[0])
    if declared is None or declared > max_rounds:
        log.debug(
            "Rejected log header",
            extra={"header": lines[0][:40], "declared": declared, "max_rounds": max_rounds},
        )
        return ResolverError.invalid_format()

    return LogLines(header=lines[0], round_lines=lines[1:], declared_round_count=declared)


__all__ = ["validate"]
