"""Data models for myth verification."""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class Verdict(str, Enum):
    """Judgment on a health claim."""

    TRUE = "True"
    FALSE = "False"
    MIXED = "Mixed"
    DEPENDS = "Depends"


class ClaimRecord(BaseModel):
    """A known health claim with its verdict and guidance."""

    model_config = ConfigDict(frozen=True)

    id: str
    claim: str
    patterns: Tuple[str, ...]
    verdict: Verdict
    explanation: str
    safe_advice: Tuple[str, ...]
    escalation_signs: Tuple[str, ...]
    source_label: str

    @field_validator("patterns")
    @classmethod
    def _patterns_lowercase(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        for pattern in value:
            if not pattern or pattern != pattern.lower():
                raise ValueError(f"pattern must be non-empty lower-case text: {pattern!r}")
        return value

    @field_validator("safe_advice", "escalation_signs")
    @classmethod
    def _non_empty(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("guidance lists must contain at least one entry")
        return value


class ClassificationResult(BaseModel):
    """Display copy of the record a statement was matched to."""

    record_id: str
    claim: str
    verdict: Verdict
    explanation: str
    safe_advice: List[str]
    escalation_signs: List[str]
    source_label: str
    is_fallback: bool = False
    score: int = 0

    @classmethod
    def from_record(
        cls, record: ClaimRecord, *, is_fallback: bool = False, score: int = 0,
    ) -> ClassificationResult:
        return cls(
            record_id=record.id,
            claim=record.claim,
            verdict=record.verdict,
            explanation=record.explanation,
            safe_advice=list(record.safe_advice),
            escalation_signs=list(record.escalation_signs),
            source_label=record.source_label,
            is_fallback=is_fallback,
            score=score,
        )

    def share_text(self, statement: str) -> str:
        """Plain-text summary suitable for copying to the clipboard."""
        return (
            f"Myth Check: {statement}\n"
            f"Verdict: {self.verdict.value}\n"
            f"Explanation: {self.explanation}\n"
            f"Source: {self.source_label}"
        )


class CheckTrace(BaseModel):
    """Trace of a single myth check."""
    duration_seconds: float
    cost_usd: float = 0.0
    success: bool = True
    tools_called: List[str] = []  # e.g., ["offline_catalog", "llm_myth_check"]


class MythCheck(BaseModel):
    """Outcome of run_myth_checker."""
    statement: str
    result: ClassificationResult
    method: Literal["catalog", "fallback", "llm"]
    trace: CheckTrace
