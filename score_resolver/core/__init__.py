"""
Core stages of the Round Score Resolver.

Validator -> parser -> resolver -> formatter. Every function here is pure;
the pipeline module wires them together.
"""

from score_resolver.core.formatter import format_verdict
from score_resolver.core.parser import parse_leading_int, parse_round, parse_rounds
from score_resolver.core.resolver import deciding_round, resolve_winner
from score_resolver.core.validator import validate

__all__ = [
    "deciding_round",
    "format_verdict",
    "parse_leading_int",
    "parse_round",
    "parse_rounds",
    "resolve_winner",
    "validate",
]
