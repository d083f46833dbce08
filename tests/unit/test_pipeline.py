from __future__ import annotations

import io
from pathlib import Path

import pytest

from score_resolver.adapters.sinks import FileResultSink, StdoutResultSink
from score_resolver.config import Settings
from score_resolver.domain.errors import ErrorKind
from score_resolver.domain.models import InputMode, Resolution, SubmissionRequest, Verdict
from score_resolver.pipeline import resolve_log, submit

SCENARIO_A = "2\n10 5\n3 20"
SCENARIO_B = "1\n7 7"


class RecordingSink:
    name = "recording"

    def __init__(self) -> None:
        self.delivered: list[tuple[str, str]] = []

    def deliver(self, formatted_text: str, suggested_name: str) -> None:
        self.delivered.append((formatted_text, suggested_name))


class TestResolveLog:
    """Core pipeline over raw text."""

    def test_scenario_a_party_two_wins(self):
        resolution = resolve_log(SCENARIO_A)

        assert resolution.ok
        assert [(r.party_one_score, r.party_two_score) for r in resolution.rounds] == [
            (10, 5),
            (3, 20),
        ]
        assert resolution.verdict == Verdict(winning_party="2", max_margin=17)
        assert resolution.output == "2 17"

    def test_scenario_b_draw_has_no_winner(self):
        resolution = resolve_log(SCENARIO_B)

        assert resolution.verdict == Verdict(winning_party="", max_margin=0)
        assert resolution.output == " 0"

    def test_scenario_c_single_line_is_invalid(self):
        resolution = resolve_log("3")

        assert not resolution.ok
        assert resolution.error.kind is ErrorKind.INVALID_FORMAT
        assert resolution.verdict is None
        assert resolution.output is None

    def test_scenario_d_round_count_mismatch(self):
        resolution = resolve_log("3\n10 5\n3 20")

        assert resolution.error.kind is ErrorKind.ROUND_COUNT_MISMATCH
        assert resolution.error.expected == 3
        assert resolution.error.actual == 2
        assert resolution.error.message == (
            "The number of rounds is incorrect: expected: 3 received: 2"
        )
        assert resolution.verdict is None
        assert len(resolution.rounds) == 2

    def test_more_round_lines_than_declared_is_a_mismatch(self):
        resolution = resolve_log("1\n10 5\n3 20")

        assert resolution.error.kind is ErrorKind.ROUND_COUNT_MISMATCH
        assert (resolution.error.expected, resolution.error.actual) == (1, 2)

    def test_trailing_newline_counts_as_a_round_line(self):
        resolution = resolve_log(SCENARIO_A + "\n")

        assert resolution.error.kind is ErrorKind.ROUND_COUNT_MISMATCH
        assert (resolution.error.expected, resolution.error.actual) == (2, 3)

    def test_declared_count_at_limit_resolves(self):
        text = "10000\n" + "\n".join("2 1" for _ in range(10_000))

        resolution = resolve_log(text)

        assert resolution.verdict == Verdict(winning_party="1", max_margin=1)

    def test_declared_count_above_limit_is_invalid(self):
        text = "10001\n" + "\n".join("2 1" for _ in range(10_001))

        assert resolve_log(text).error.kind is ErrorKind.INVALID_FORMAT

    def test_non_numeric_rounds_never_win(self):
        resolution = resolve_log("3\nabc 100\n4 1\n1 x")

        assert resolution.output == "1 3"

    def test_oversized_round_token_never_wins(self):
        resolution = resolve_log("2\n" + "9" * 5000 + " 1\n4 1")

        assert resolution.ok
        assert resolution.rounds[0].margin is None
        assert resolution.output == "1 3"

    def test_oversized_header_is_invalid(self):
        resolution = resolve_log("9" * 5000 + "\n1 2")

        assert resolution.error.kind is ErrorKind.INVALID_FORMAT

    def test_resolving_twice_is_deterministic(self):
        assert resolve_log(SCENARIO_A) == resolve_log(SCENARIO_A)


def test_resolution_requires_exactly_one_outcome():
    with pytest.raises(ValueError):
        Resolution()
    with pytest.raises(ValueError):
        Resolution(
            verdict=Verdict(winning_party="1", max_margin=1),
            error=resolve_log("3").error,
        )


class TestSubmit:
    """Submission pipeline with sources and sinks."""

    def test_manual_submission_delivers_result(self, test_settings: Settings):
        sink = RecordingSink()
        request = SubmissionRequest(mode=InputMode.MANUAL, text=SCENARIO_A)

        resolution = submit(request, sink, settings=test_settings)

        assert resolution.ok
        assert sink.delivered == [("2 17", "output.txt")]

    def test_scenario_e_empty_text_fails_before_core(self, test_settings: Settings):
        sink = RecordingSink()
        request = SubmissionRequest(mode=InputMode.MANUAL, text="   \n ")

        resolution = submit(request, sink, settings=test_settings)

        assert resolution.error.kind is ErrorKind.EMPTY_TEXT_FIELD
        assert resolution.error.message == "Text field is empty."
        assert resolution.rounds == []
        assert sink.delivered == []

    def test_file_submission_writes_output_file(
        self, test_settings: Settings, scenario_a_file: Path
    ):
        sink = FileResultSink(test_settings.output_dir)
        request = SubmissionRequest(mode=InputMode.FILE, file_path=scenario_a_file)

        resolution = submit(request, sink, settings=test_settings)

        assert resolution.ok
        assert sink.last_path == test_settings.output_dir / "output.txt"
        assert sink.last_path.read_text(encoding="utf-8") == "2 17"

    def test_file_mode_without_file(self, test_settings: Settings):
        sink = RecordingSink()
        request = SubmissionRequest(mode=InputMode.FILE, text=SCENARIO_A)

        resolution = submit(request, sink, settings=test_settings)

        assert resolution.error.kind is ErrorKind.NO_FILE_SELECTED
        assert sink.delivered == []

    def test_missing_file_is_unreadable(self, test_settings: Settings, tmp_path: Path):
        sink = RecordingSink()
        request = SubmissionRequest(mode=InputMode.FILE, file_path=tmp_path / "missing.txt")

        resolution = submit(request, sink, settings=test_settings)

        assert resolution.error.kind is ErrorKind.UNREADABLE_FILE
        assert resolution.error.message == "Failed to read the file."

    def test_format_errors_are_not_delivered(self, test_settings: Settings):
        sink = RecordingSink()
        request = SubmissionRequest(mode=InputMode.MANUAL, text="3\n10 5\n3 20")

        resolution = submit(request, sink, settings=test_settings)

        assert resolution.error.kind is ErrorKind.ROUND_COUNT_MISMATCH
        assert sink.delivered == []

    def test_settings_limit_is_applied(self, test_settings: Settings):
        settings = test_settings.model_copy(update={"max_declared_rounds": 1})
        request = SubmissionRequest(mode=InputMode.MANUAL, text=SCENARIO_A)

        resolution = submit(request, RecordingSink(), settings=settings)

        assert resolution.error.kind is ErrorKind.INVALID_FORMAT

    def test_custom_output_name_is_suggested(self, test_settings: Settings):
        stream = io.StringIO()
        settings = test_settings.model_copy(update={"output_filename": "verdict.txt"})
        request = SubmissionRequest(mode=InputMode.MANUAL, text=SCENARIO_B)

        submit(request, StdoutResultSink(stream), settings=settings)

        assert stream.getvalue() == " 0\n"
