"""Check definitions for prompt analysis.

Each check is a frozen dataclass containing:
- A unique identifier and human-readable name
- The keywords the analyzer looks for (lowercase, raw substring match)
- The severity, the clarity-score penalty, and the suggestion to show

The analyzer runs the checks in the order of ``ALL_CHECKS``; suggestions
are reported in that same order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    """How much a failed check hurts prompt clarity."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Check:
    """A single heuristic check applied to a prompt."""

    id: str
    name: str
    severity: Severity
    description: str
    suggestion: str
    penalty: int
    # Keywords / phrases (lowercase) the check searches for
    keyword_signals: tuple[str, ...] = field(default_factory=tuple)


# Prompts shorter than this many characters are flagged as lacking context
MIN_PROMPT_LENGTH = 20

STARTING_SCORE = 100


AMBIGUOUS_REFERENCE = Check(
    id="ambiguous_reference",
    name="Ambiguous Reference",
    severity=Severity.MEDIUM,
    description="The prompt refers to something as 'it' or 'this' instead of naming it.",
    suggestion=(
        'Consider replacing ambiguous pronouns like "it" or "this" '
        "with more specific references."
    ),
    penalty=10,
    # Matched anywhere in the text, so "thistle" and "with" count too
    keyword_signals=("it", "this"),
)

INSUFFICIENT_LENGTH = Check(
    id="insufficient_length",
    name="Insufficient Context",
    severity=Severity.HIGH,
    description=f"The prompt is shorter than {MIN_PROMPT_LENGTH} characters.",
    suggestion=(
        "The prompt may lack sufficient context. "
        "Consider adding more detail to guide the model."
    ),
    penalty=20,
)

MISSING_INSTRUCTION = Check(
    id="missing_instruction",
    name="No Explicit Instruction",
    severity=Severity.LOW,
    description="The prompt never asks for anything explicitly.",
    suggestion=(
        'Consider adding explicit instructions, such as "Please generate" '
        'or "Please provide".'
    ),
    penalty=5,
    # Detected by *absence* of every keyword
    keyword_signals=("please", "generate"),
)

ALL_CHECKS: tuple[Check, ...] = (
    AMBIGUOUS_REFERENCE,
    INSUFFICIENT_LENGTH,
    MISSING_INSTRUCTION,
)
