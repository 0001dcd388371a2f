"""Myth Checker — Function (offline first, at most one LLM call).

Verifies a statement against the offline claim catalog and, only when
the catalog has no confident match, asks Claude for a structured
verdict. Any LLM failure degrades to the offline general result, so a
check always completes.

Type: Function (single LLM call, no tool use)
Model: Claude Sonnet

Input:
- statement: free-text health claim

Output:
- MythCheck with the result, the method that produced it
  ("catalog", "llm" or "fallback") and a trace
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any, Literal

import anthropic

from myth_buster.catalog import GENERAL_RESULT
from myth_buster.config import ANTHROPIC_API_KEY, CLAUDE_MODEL, VERDICTS
from myth_buster.functions.myth_classifier import classify
from myth_buster.models import CheckTrace, ClassificationResult, MythCheck, Verdict

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

LLM_RECORD_ID = "llm"
LLM_SOURCE_LABEL = "AI-generated guidance (unverified)"

Locale = Literal["en", "bn"]

LANGUAGES: dict[str, str] = {"en": "English", "bn": "Bangla"}


# ---------------------------------------------------------------------------
# System prompt
# ---------------------------------------------------------------------------

_MYTH_SYSTEM_PROMPT = """\
You are a maternal health educator. Given a statement about pregnancy or \
baby health, judge whether it is a myth and give short, practical guidance.

Respond with ONLY valid JSON:
{
  "verdict": "True" | "False" | "Mixed" | "Depends",
  "explanation": "one or two sentences",
  "safe_advice": ["short actionable tip", ...],
  "escalation_signs": ["when to contact a clinician", ...]
}

Rules:
- "verdict" must be exactly one of True, False, Mixed, Depends
- Use "Depends" when the answer varies by person or circumstance
- Give 1-3 entries in each list
- This is general guidance, never a diagnosis"""


# ---------------------------------------------------------------------------
# LLM path
# ---------------------------------------------------------------------------


def _guidance_list(value: Any) -> list[str]:
    """Coerce a model-supplied guidance field into a list of strings."""
    if isinstance(value, str):
        value = [value]
    elif not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if str(item).strip()]


def _check_with_llm(statement: str, locale: Locale = "en") -> tuple[ClassificationResult, float]:
    """Use Claude to verify a statement the catalog could not match.

    Returns:
        (result, cost_usd)
    """
    client = anthropic.Anthropic(api_key=ANTHROPIC_API_KEY)
    message = client.messages.create(
        model=CLAUDE_MODEL,
        max_tokens=500,
        system=_MYTH_SYSTEM_PROMPT,
        messages=[{
            "role": "user",
            "content": f'Statement: "{statement}"\nRespond in {LANGUAGES.get(locale, "English")}.',
        }],
    )

    response_text = message.content[0].text.strip()

    # Cost
    input_tokens = message.usage.input_tokens
    output_tokens = message.usage.output_tokens
    cost = (input_tokens * 3.0 + output_tokens * 15.0) / 1_000_000

    # Parse JSON (errors propagate to run_myth_checker, which logs them)
    if response_text.startswith("```"):
        response_text = response_text.split("```")[1]
        if response_text.startswith("json"):
            response_text = response_text[4:]
        response_text = response_text.strip()

    data = json.loads(response_text)

    verdict = data.get("verdict")
    if verdict not in VERDICTS:
        verdict = Verdict.DEPENDS.value

    # Keep the non-empty guidance guarantee even if the model omits a list
    safe_advice = _guidance_list(data.get("safe_advice"))
    escalation_signs = _guidance_list(data.get("escalation_signs"))

    result = ClassificationResult(
        record_id=LLM_RECORD_ID,
        claim=statement,
        verdict=Verdict(verdict),
        explanation=data.get("explanation") or GENERAL_RESULT.explanation,
        safe_advice=safe_advice or list(GENERAL_RESULT.safe_advice),
        escalation_signs=escalation_signs or list(GENERAL_RESULT.escalation_signs),
        source_label=LLM_SOURCE_LABEL,
    )
    return result, cost


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


async def run_myth_checker(
    statement: str | None, use_llm: bool = True, locale: Locale = "en",
) -> MythCheck:
    """Run the myth checker.

    The offline catalog always runs first. Claude is consulted only for
    statements that fall back to the general result, and only when an
    API key is configured.

    Args:
        statement: The health claim to verify.
        use_llm: Set False to stay fully offline.
        locale: Response language for the LLM path ("en" or "bn").

    Returns:
        A MythCheck; never raises.
    """
    start_time = time.time()
    result = classify(statement)
    method = "fallback" if result.is_fallback else "catalog"
    cost = 0.0
    tools_called = ["offline_catalog"]

    if result.is_fallback and use_llm and ANTHROPIC_API_KEY and statement and statement.strip():
        try:
            result, cost = await asyncio.to_thread(_check_with_llm, statement, locale)
            method = "llm"
            tools_called.append("llm_myth_check")
        except Exception as e:
            logger.warning("LLM myth check failed, using offline result: %s", e)
            tools_called.append("llm_myth_check_failed")

    duration = time.time() - start_time

    trace = CheckTrace(
        duration_seconds=round(duration, 2),
        cost_usd=round(cost, 6),
        success=True,
        tools_called=tools_called,
    )

    return MythCheck(statement=statement or "", result=result, method=method, trace=trace)
