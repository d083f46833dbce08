"""
Round parser: turns round lines into ``Round`` values.

Parsing is loose. A token is read as its leading integer
(``"7pts"`` is 7), and anything that has no leading integer becomes ``None``
instead of failing the whole log. Only ASCII digits count.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from score_resolver.domain.models import Round

_LEADING_INT_RE = re.compile(r"\s*([+-]?)([0-9]+)")


def parse_leading_int(text: str) -> Optional[int]:
    """
    Read the integer at the start of ``text``, ignoring whatever follows it.

    Returns None when ``text`` does not start with an (optionally signed)
    run of digits, e.g. ``"11 15 38"`` -> 11, ``"abc"`` -> None. A digit run
    too long for ``int()`` to convert also gives None.
    """
    match = _LEADING_INT_RE.match(text)
    if match is None:
        return None
    sign, digits = match.groups()
    try:
        return int(sign + (digits.lstrip("0") or "0"))
    except ValueError:
        return None


def parse_round(line: str) -> Round:
    """Parse the first two whitespace-separated tokens of a round line."""
    tokens = line.split()
    scores = [parse_leading_int(token) for token in tokens[:2]]
    scores += [None] * (2 - len(scores))
    return Round(party_one_score=scores[0], party_two_score=scores[1])


def parse_rounds(lines: Sequence[str]) -> List[Round]:
    """Parse every round line, in order. One round per line, blank lines included."""
    return [parse_round(line) for line in lines]


__all__ = ["parse_leading_int", "parse_round", "parse_rounds"]
