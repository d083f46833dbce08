"""
Pipeline for resolving game logs and delivering the verdict.

Usage (example from CLI):
    from score_resolver.pipeline import resolve_log

    resolution = resolve_log("2\\n10 5\\n3 20")
    print(resolution.output)  # "2 17"

``resolve_log`` is the pure core: validate, parse, check the round count,
resolve and format. ``submit`` adds the edges: it reads a content source,
runs the core and hands a successful result to a result sink.
"""

from __future__ import annotations

from typing import Optional

from score_resolver.adapters.abstract import ResultSink
from score_resolver.adapters.sources import build_source
from score_resolver.config import MAX_DECLARED_ROUNDS, Settings, get_settings
from score_resolver.core.formatter import format_verdict
from score_resolver.core.parser import parse_rounds
from score_resolver.core.resolver import resolve_winner
from score_resolver.core.validator import validate
from score_resolver.domain.errors import ContentError, ResolverError
from score_resolver.domain.models import Resolution, SubmissionRequest
from score_resolver.utils.logging import get_logger

log = get_logger(__name__)


def resolve_log(raw_text: str, max_rounds: int = MAX_DECLARED_ROUNDS) -> Resolution:
    """
    Run the core stages over one raw log.

    Parameters
    ----------
    raw_text : str
        Complete log text.
    max_rounds : int
        Largest declared round count accepted.

    Returns
    -------
    Resolution
        The verdict and formatted output, or the error that stopped the run.
        A round-count mismatch keeps the parsed rounds but carries no verdict.
    """
    validated = validate(raw_text, max_rounds=max_rounds)
    if isinstance(validated, ResolverError):
        return Resolution.failed(validated)

    rounds = parse_rounds(validated.round_lines)
    if len(rounds) != validated.declared_round_count:
        return Resolution.failed(
            ResolverError.round_count_mismatch(validated.declared_round_count, len(rounds)),
            rounds=rounds,
        )

    verdict = resolve_winner(rounds)
    return Resolution(verdict=verdict, rounds=rounds, output=format_verdict(verdict))


def submit(
    request: SubmissionRequest,
    sink: ResultSink,
    settings: Optional[Settings] = None,
) -> Resolution:
    """
    Read the request's content, resolve it and deliver the result.

    Nothing reaches ``sink`` unless the whole pipeline succeeded. Content
    errors from the source are returned as a failed resolution, like any
    other error.
    """
    settings = settings or get_settings()
    source = build_source(request, encoding=settings.text_encoding)
    log.info(f"[SUBMIT] {source.name}", extra={"source": source.name, "sink": sink.name})

    try:
        raw_text = source.read()
    except ContentError as exc:
        log.warning(
            f"[SUBMIT FAILED] {exc}",
            extra={"source": source.name, "error_kind": exc.kind.value},
        )
        return Resolution.failed(exc.to_error())

    resolution = resolve_log(raw_text, max_rounds=settings.max_declared_rounds)
    if not resolution.ok:
        log.warning(
            f"[SUBMIT FAILED] {resolution.error.message}",
            extra={"source": source.name, "error_kind": resolution.error.kind.value},
        )
        return resolution

    sink.deliver(resolution.output, settings.output_filename)
    log.info(
        "[SUBMIT COMPLETE]",
        extra={
            "source": source.name,
            "rounds": len(resolution.rounds),
            "winning_party": resolution.verdict.winning_party,
            "max_margin": resolution.verdict.max_margin,
        },
    )
    return resolution


__all__ = ["resolve_log", "submit"]
