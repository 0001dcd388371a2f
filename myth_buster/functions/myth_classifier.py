"""Myth Classifier — Function (no LLM call).

Maps a free-text health statement onto one record of the static claim
catalog, or onto the general fallback when nothing matches with enough
confidence. Runs fully offline and is a pure function of its input:
safe to call from any thread without locking.

Type: Function (rule-based, no tool use)

Scoring:
- The statement is lower-cased, stripped of a fixed punctuation set,
  whitespace-collapsed and trimmed.
- Each record scores the summed character length of every trigger
  pattern found as a substring (each pattern counted once).
- The highest score wins; earlier records win ties.
- Scores at or below the threshold fall back to the general result.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from myth_buster.catalog import CATALOG, GENERAL_RESULT
from myth_buster.config import MATCH_THRESHOLD
from myth_buster.models import ClaimRecord, ClassificationResult

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_PUNCTUATION_PATTERN = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")
_WHITESPACE_PATTERN = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Normalization and scoring
# ---------------------------------------------------------------------------


def normalize(text: str | None) -> str:
    """Lower-case, strip punctuation, collapse whitespace and trim."""
    if not text:
        return ""
    cleaned = _PUNCTUATION_PATTERN.sub("", text.lower())
    return _WHITESPACE_PATTERN.sub(" ", cleaned).strip()


def score_record(normalized: str, record: ClaimRecord) -> int:
    """Sum the lengths of the record's patterns found in ``normalized``."""
    return sum(len(pattern) for pattern in record.patterns if pattern in normalized)


def best_match(
    normalized: str,
    records: Iterable[ClaimRecord] = CATALOG,
) -> tuple[ClaimRecord | None, int]:
    """Return the highest-scoring record and its score.

    Only a strictly greater score replaces the current leader, so the
    first record seen wins a tie. Returns ``(None, 0)`` when nothing
    scores at all.
    """
    leader: ClaimRecord | None = None
    max_score = 0
    for record in records:
        score = score_record(normalized, record)
        if score > max_score:
            leader, max_score = record, score
    return leader, max_score


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def classify(text: str | None, *, threshold: int = MATCH_THRESHOLD) -> ClassificationResult:
    """Classify a health statement against the claim catalog.

    Never raises: empty, whitespace-only or punctuation-only input, and
    input that matches nothing, all return the general fallback result.

    Args:
        text: The statement to verify, in any language.
        threshold: A match must score strictly above this value.

    Returns:
        The matched record's result, or the fallback with ``is_fallback`` set.
    """
    normalized = normalize(text)
    if not normalized:
        logger.debug("Empty statement, returning general result")
        return ClassificationResult.from_record(GENERAL_RESULT, is_fallback=True)

    record, score = best_match(normalized)
    if record is None or score <= threshold:
        logger.debug("No confident match (score=%d) for %r", score, normalized[:80])
        return ClassificationResult.from_record(GENERAL_RESULT, is_fallback=True)

    logger.debug("Matched %s (score=%d) for %r", record.id, score, normalized[:80])
    return ClassificationResult.from_record(record, score=score)
