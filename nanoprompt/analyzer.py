"""Heuristic prompt analysis.

Scores a prompt's clarity on a 0-100 scale using simple keyword and length
checks. Every check that fires subtracts its penalty from a starting score
of 100 and contributes one suggestion. No API key or external service is
required -- everything runs locally and deterministically.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from nanoprompt.patterns import (
    ALL_CHECKS,
    MIN_PROMPT_LENGTH,
    STARTING_SCORE,
    Check,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result data structures
# ---------------------------------------------------------------------------

@dataclass
class Finding:
    """A check that fired for the analyzed prompt."""

    check: Check
    evidence: str = ""


@dataclass
class AnalysisResult:
    """Complete analysis of a single prompt."""

    prompt: str
    suggestions: list[str] = field(default_factory=list)
    clarity_score: int = STARTING_SCORE
    findings: list[Finding] = field(default_factory=list)

    @property
    def label(self) -> str:
        s = self.clarity_score
        if s >= 90:
            return "Excellent"
        if s >= 75:
            return "Good"
        if s >= 60:
            return "Fair"
        if s >= 40:
            return "Weak"
        return "Poor"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _first_keyword(text_lower: str, keywords: tuple[str, ...]) -> str | None:
    for kw in keywords:
        if kw in text_lower:
            return kw
    return None


def _evaluate(check: Check, prompt: str, text_lower: str) -> str | None:
    """Return evidence text if ``check`` fires for the prompt, else None."""
    if check.id == "insufficient_length":
        if len(prompt) < MIN_PROMPT_LENGTH:
            return f"{len(prompt)} characters"
        return None

    if check.id == "missing_instruction":
        if _first_keyword(text_lower, check.keyword_signals) is None:
            return "No instruction keyword found"
        return None

    kw = _first_keyword(text_lower, check.keyword_signals)
    if kw is not None:
        return f'Contains: "{kw}"'
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def analyze(prompt: str) -> AnalysisResult:
    """Analyze a prompt and return its clarity score and suggestions.

    The checks are independent and run in a fixed order, so the
    suggestions always come back in the same order for the same prompt.

    Args:
        prompt: The prompt text, analyzed as given.

    Returns:
        An AnalysisResult with the suggestions, the findings that produced
        them, and a clarity score between 0 and 100.
    """
    text_lower = prompt.lower()
    score = STARTING_SCORE
    suggestions: list[str] = []
    findings: list[Finding] = []

    for check in ALL_CHECKS:
        evidence = _evaluate(check, prompt, text_lower)
        if evidence is None:
            continue
        suggestions.append(check.suggestion)
        findings.append(Finding(check=check, evidence=evidence))
        score -= check.penalty

    score = max(0, score)
    logger.debug(
        "Analyzed prompt (%d chars): score=%d, checks fired=%s",
        len(prompt),
        score,
        [f.check.id for f in findings],
    )
    return AnalysisResult(
        prompt=prompt,
        suggestions=suggestions,
        clarity_score=score,
        findings=findings,
    )
