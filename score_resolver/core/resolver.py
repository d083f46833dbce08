"""
Winner resolver: a single scan over the rounds for the largest margin.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from score_resolver.domain.models import Round, Verdict


def deciding_round(rounds: Sequence[Round]) -> Optional[int]:
    """
    Index of the round that sets the final maximum margin, or None.

    Only a strictly greater margin replaces the current maximum, so on ties the
    earliest round wins. Rounds with a missing score are skipped, and a margin
    of 0 never decides anything.
    """
    max_margin = 0
    deciding: Optional[int] = None

    for index, round_ in enumerate(rounds):
        margin = round_.margin
        if margin is None:
            continue
        if margin > max_margin:
            max_margin = margin
            deciding = index

    return deciding


def resolve_winner(rounds: Iterable[Round]) -> Verdict:
    """
    Find the party with the largest single-round margin.

    When no round has a positive margin the verdict is ``("", 0)``.
    """
    rounds = list(rounds)
    index = deciding_round(rounds)
    if index is None:
        return Verdict(winning_party="", max_margin=0)

    winner = rounds[index]
    return Verdict(winning_party=winner.leader, max_margin=winner.margin)


__all__ = ["deciding_round", "resolve_winner"]
