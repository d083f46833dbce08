from __future__ import annotations

from score_resolver.core.formatter import format_verdict
from score_resolver.core.resolver import deciding_round, resolve_winner
from score_resolver.domain.models import Round, Verdict


def _rounds(*pairs) -> list[Round]:
    return [Round(party_one_score=a, party_two_score=b) for a, b in pairs]


def test_resolve_picks_largest_margin():
    verdict = resolve_winner(_rounds((10, 5), (3, 20)))

    assert verdict == Verdict(winning_party="2", max_margin=17)


def test_resolve_party_one_leading():
    verdict = resolve_winner(_rounds((40, 2), (3, 20)))

    assert verdict == Verdict(winning_party="1", max_margin=38)


def test_resolve_tie_keeps_earlier_winner():
    verdict = resolve_winner(_rounds((10, 5), (5, 10)))

    assert verdict == Verdict(winning_party="1", max_margin=5)


def test_resolve_no_positive_margin_has_no_winner():
    verdict = resolve_winner(_rounds((7, 7), (0, 0)))

    assert verdict == Verdict(winning_party="", max_margin=0)


def test_resolve_empty_sequence():
    assert resolve_winner([]) == Verdict(winning_party="", max_margin=0)


def test_resolve_skips_rounds_with_missing_scores():
    rounds = _rounds((None, 100), (100, None), (4, 1), (None, None))

    assert resolve_winner(rounds) == Verdict(winning_party="1", max_margin=3)


def test_resolve_negative_scores_use_absolute_margin():
    verdict = resolve_winner(_rounds((-10, 5),))

    assert verdict == Verdict(winning_party="2", max_margin=15)


def test_resolve_is_deterministic_and_does_not_mutate_input():
    rounds = _rounds((10, 5), (3, 20), (20, 3))
    snapshot = list(rounds)

    assert resolve_winner(rounds) == resolve_winner(rounds)
    assert rounds == snapshot


def test_format_verdict_with_winner():
    assert format_verdict(Verdict(winning_party="2", max_margin=17)) == "2 17"


def test_format_verdict_without_winner_keeps_leading_space():
    assert format_verdict(Verdict(winning_party="", max_margin=0)) == " 0"


def test_deciding_round_is_first_strict_maximum():
    rounds = _rounds((10, 5), (3, 20), (20, 3), (None, 1))

    assert deciding_round(rounds) == 1


def test_deciding_round_none_without_lead():
    assert deciding_round(_rounds((7, 7), (None, 3))) is None
    assert deciding_round([]) is None


def test_resolve_accepts_a_one_shot_iterator():
    verdict = resolve_winner(iter(_rounds((1, 4), (9, 2))))

    assert verdict == Verdict(winning_party="1", max_margin=7)
