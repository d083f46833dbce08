"""
Result formatter: the text payload handed to a result sink.
"""

from __future__ import annotations

from score_resolver.domain.models import Verdict


def format_verdict(verdict: Verdict) -> str:
    # An empty winner keeps its separator: " 0".
    return f"{verdict.winning_party} {verdict.max_margin}"


__all__ = ["format_verdict"]
