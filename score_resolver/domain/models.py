"""
Domain models for the Round Score Resolver.

All models are immutable and live only for a single submission: the raw log is
split into ``LogLines``, the round lines become ``Round`` values, and the scan
over them produces a ``Verdict``. ``Resolution`` wraps either the verdict or
the error that stopped the pipeline.
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from score_resolver.domain.errors import ResolverError

WinningParty = Literal["1", "2", ""]


class LogLines(BaseModel):
    """
    A raw log split on newlines, with the declared round count already extracted.
    """

    header: str = Field(..., description="First line, carrying the declared round count.")
    round_lines: List[str] = Field(default_factory=list, description="Remaining lines, one per round.")
    declared_round_count: int = Field(..., description="Leading integer of the header line.")

    model_config = {"frozen": True}


class Round(BaseModel):
    """
    Scores of both parties for one round.

    ``None`` marks a token that was missing or did not parse as an integer.
    Such a round has no margin and can never set a new maximum.
    """

    party_one_score: Optional[int] = Field(None, description="Score of party 1.")
    party_two_score: Optional[int] = Field(None, description="Score of party 2.")

    model_config = {"frozen": True}

    @property
    def margin(self) -> Optional[int]:
        if self.party_one_score is None or self.party_two_score is None:
            return None
        return abs(self.party_one_score - self.party_two_score)

    @property
    def leader(self) -> WinningParty:
        """Party ahead in this round. A draw reports ``"2"``; a round without a margin reports ``""``."""
        if self.margin is None:
            return ""
        return "1" if self.party_one_score > self.party_two_score else "2"


class Verdict(BaseModel):
    """
    Party with the largest single-round margin, and that margin.
    """

    winning_party: WinningParty = Field("", description='"1", "2" or empty when no round had a lead.')
    max_margin: int = Field(0, ge=0, description="Largest margin observed across all rounds.")

    model_config = {"frozen": True}


class InputMode(str, Enum):
    FILE = "file"
    MANUAL = "manual"


class SubmissionRequest(BaseModel):
    """
    One user submission: which input mode is active and what it holds.

    Only the field matching ``mode`` is read; the other is kept so switching
    modes does not lose what was entered.
    """

    mode: InputMode = Field(InputMode.FILE, description="File upload or manual text entry.")
    file_path: Optional[Path] = Field(None, description="Selected file (file mode).")
    text: str = Field("", description="Typed log (manual mode).")

    model_config = {"frozen": True}


class Resolution(BaseModel):
    """
    Outcome of one pipeline run: a verdict or the error that stopped it.
    """

    verdict: Optional[Verdict] = None
    error: Optional[ResolverError] = None
    rounds: List[Round] = Field(default_factory=list)
    output: Optional[str] = Field(None, description="Formatted verdict handed to the result sink.")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> "Resolution":
        if (self.verdict is None) == (self.error is None):
            raise ValueError("a resolution carries exactly one of verdict or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, error: ResolverError, rounds: Optional[List[Round]] = None) -> "Resolution":
        return cls(error=error, rounds=rounds or [])


__all__ = [
    "InputMode",
    "LogLines",
    "Resolution",
    "Round",
    "SubmissionRequest",
    "Verdict",
    "WinningParty",
]
