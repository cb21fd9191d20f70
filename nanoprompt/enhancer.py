"""Weighted prompt enhancement.

Given a base prompt and a set of candidate enhancements with weights, pick
the candidate with the highest normalized weight and append it to the
prompt. Ties go to the candidate that appears first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from nanoprompt.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeightedEnhancement:
    """A candidate enhancement and its normalized weight."""

    text: str
    weight: float


def rank_enhancements(
    enhancements: Sequence[str],
    weights: Sequence[float],
) -> list[WeightedEnhancement]:
    """Normalize the weights and rank the enhancements, best first.

    Weights are divided by their sum so they add up to 1. The sort is
    stable, so equally weighted candidates keep their input order.

    Raises:
        InvalidArgumentError: If the counts differ, no enhancements are
            given, or the weights sum to zero.
    """
    if len(enhancements) != len(weights):
        raise InvalidArgumentError(
            "The number of enhancements must match the number of weights "
            f"(got {len(enhancements)} enhancements, {len(weights)} weights)."
        )
    if not enhancements:
        raise InvalidArgumentError("At least one enhancement is required.")

    total_weight = sum(weights)
    if total_weight == 0:
        raise InvalidArgumentError("Enhancement weights must not sum to zero.")

    weighted = [
        WeightedEnhancement(text=text, weight=weight / total_weight)
        for text, weight in zip(enhancements, weights)
    ]
    return sorted(weighted, key=lambda w: w.weight, reverse=True)


def enhance(
    base_prompt: str,
    enhancements: Sequence[str],
    weights: Sequence[float],
) -> str:
    """Append the highest-weighted enhancement to a base prompt.

    Args:
        base_prompt: The original prompt.
        enhancements: Candidate text to append.
        weights: One non-negative weight per enhancement.

    Returns:
        ``base_prompt``, a space, and the winning enhancement, with
        surrounding whitespace trimmed.

    Raises:
        InvalidArgumentError: See :func:`rank_enhancements`.
    """
    best = rank_enhancements(enhancements, weights)[0]
    logger.debug("Selected enhancement %r (weight %.3f)", best.text, best.weight)
    return f"{base_prompt} {best.text}".strip()
