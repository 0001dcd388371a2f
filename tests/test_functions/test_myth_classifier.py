"""Tests for the Myth Classifier function node."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from myth_buster.catalog import CATALOG, GENERAL_RESULT
from myth_buster.functions.myth_classifier import (
    best_match,
    classify,
    normalize,
    score_record,
)
from myth_buster.models import ClaimRecord, Verdict


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_record(record_id: str, patterns: tuple[str, ...]) -> ClaimRecord:
    """Build a minimal ClaimRecord for scoring tests."""
    return ClaimRecord(
        id=record_id,
        claim=f"Claim {record_id}",
        patterns=patterns,
        verdict=Verdict.TRUE,
        explanation="Explanation.",
        safe_advice=("Advice",),
        escalation_signs=("Sign",),
        source_label="Test",
    )


def _assert_fallback(result) -> None:
    assert result.is_fallback is True
    assert result.record_id == GENERAL_RESULT.id
    assert result.verdict == Verdict.DEPENDS
    assert result.source_label == "Nurture Glow General Guidance"
    assert result.safe_advice == list(GENERAL_RESULT.safe_advice)
    assert result.score == 0


# ---------------------------------------------------------------------------
# Tests: Normalization
# ---------------------------------------------------------------------------


class TestNormalize:
    """Tests for normalize."""

    def test_lowercases_and_trims(self):
        assert normalize("  COFFEE  ") == "coffee"

    def test_strips_punctuation_set(self):
        assert normalize("hot-tub; (sauna)!") == "hottub sauna"

    def test_question_mark_is_kept(self):
        assert normalize("Coffee?!") == "coffee?"

    def test_collapses_whitespace(self):
        assert normalize("spicy \t\n  food") == "spicy food"

    def test_punctuation_only_becomes_empty(self):
        assert normalize(".,/#!$%^&*;:{}=-_`~()") == ""

    def test_none_becomes_empty(self):
        assert normalize(None) == ""


# ---------------------------------------------------------------------------
# Tests: Scoring
# ---------------------------------------------------------------------------


class TestScoring:
    """Tests for score_record and best_match."""

    def test_sums_matched_pattern_lengths(self):
        spicy = CATALOG[1]
        assert score_record("can spicy food cause a miscarriage?", spicy) == len("spicy food") + len("spicy")

    def test_pattern_counted_once_per_record(self):
        record = _make_record("x", ("gym",))
        assert score_record("gym gym gym", record) == 3

    def test_no_match_scores_zero(self):
        assert best_match("nothing relevant here") == (None, 0)

    def test_earlier_record_wins_tie(self):
        first = _make_record("first", ("abc",))
        second = _make_record("second", ("xyz",))
        record, score = best_match("abc xyz", [first, second])
        assert record.id == "first"
        assert score == 3

    def test_higher_score_beats_earlier_record(self):
        first = _make_record("first", ("abc",))
        second = _make_record("second", ("xyz", "xyz1"))
        record, score = best_match("abc xyz1", [first, second])
        assert record.id == "second"
        assert score == 7


# ---------------------------------------------------------------------------
# Tests: classify
# ---------------------------------------------------------------------------


class TestClassify:
    """Tests for the main entry point."""

    @pytest.mark.parametrize("text", ["", "   ", "\t\n", "?!.,;:", None])
    def test_empty_input_returns_fallback(self, text):
        _assert_fallback(classify(text))

    def test_very_long_input_does_not_raise(self):
        result = classify("lorem ipsum " * 20_000)
        assert result.verdict in set(Verdict)

    def test_gibberish_returns_fallback(self):
        _assert_fallback(classify("asdkjasdjk random gibberish"))

    def test_case_and_punctuation_insensitive(self):
        ids = {classify(s).record_id for s in ("Coffee?!", "coffee", "  COFFEE  ")}
        assert ids == {"m1"}

    def test_deterministic(self):
        text = "Is it okay to drink coffee every day?"
        assert classify(text) == classify(text)

    def test_coffee_scenario(self):
        result = classify("Is it okay to drink coffee every day?")
        assert result.record_id == "m1"
        assert result.verdict == Verdict.DEPENDS
        assert result.is_fallback is False
        assert "moderate amounts" in result.explanation.lower()
        assert result.safe_advice

    def test_spicy_food_scenario(self):
        result = classify("Can spicy food cause a miscarriage?")
        assert result.record_id == "m2"
        assert result.verdict == Verdict.FALSE
        assert result.safe_advice == [
            "Eat small portions",
            "Avoid lying down immediately after eating spicy food",
        ]
        assert result.escalation_signs == ["Indigestion is accompanied by severe abdominal pain"]
        assert any("portion" in a.lower() for a in result.safe_advice)

    def test_catalog_tie_prefers_earlier_record(self):
        # "tea" (caffeine) and "sex" both score 3
        assert classify("tea and sex").record_id == "m1"
        assert classify("sex and tea").record_id == "m1"

    def test_score_at_threshold_falls_back(self):
        # "চা" is a two-character caffeine pattern
        _assert_fallback(classify("চা"))

    def test_score_above_threshold_matches(self):
        result = classify("চুল")
        assert result.record_id == "m10"
        assert result.verdict == Verdict.MIXED
        assert result.score == 3

    def test_custom_threshold(self):
        _assert_fallback(classify("coffee", threshold=6))
        assert classify("coffee", threshold=5).record_id == "m1"

    def test_bangla_pattern(self):
        result = classify("আনারস খেলে কি গর্ভপাত হয়?")
        assert result.record_id == "m15"

    def test_longer_pattern_outranks_short_one(self):
        # "bath" (hot tubs) is shorter than "sleep position" (back sleeping)
        assert classify("best sleep position after a bath").record_id == "m3"

    def test_result_is_independent_copy(self):
        result = classify("coffee")
        result.safe_advice.append("mutated")
        assert "mutated" not in classify("coffee").safe_advice
        assert "mutated" not in CATALOG[0].safe_advice

    def test_concurrent_calls_agree(self):
        inputs = ["coffee", "spicy food", "", "cats and litter", "gibberish"] * 20
        expected = [classify(s) for s in inputs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            assert list(pool.map(classify, inputs)) == expected


# ---------------------------------------------------------------------------
# Tests: Result guarantees
# ---------------------------------------------------------------------------


class TestResultGuarantees:
    """Every record, and the fallback, yields well-formed results."""

    @pytest.mark.parametrize("record", CATALOG, ids=lambda r: r.id)
    def test_first_pattern_matches_its_record(self, record):
        result = classify(record.patterns[0])
        assert result.record_id == record.id
        assert result.verdict in set(Verdict)
        assert result.safe_advice
        assert result.escalation_signs

    def test_share_text(self):
        result = classify("spicy food")
        assert result.share_text("Is spicy food dangerous?") == (
            "Myth Check: Is spicy food dangerous?\n"
            "Verdict: False\n"
            "Explanation: Spicy food is perfectly safe for the baby, though it might "
            "cause you significant heartburn or indigestion.\n"
            "Source: NHS UK"
        )
