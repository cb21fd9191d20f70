"""Keyword-substitution prompt variations."""

from __future__ import annotations

import logging
import math
from typing import Mapping, Sequence

from nanoprompt.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def _variation_count(substitutions: Mapping[str, Sequence[str]]) -> int:
    return int(round(math.sqrt(len(substitutions))))


def generate_variations(
    seed_prompt: str,
    substitutions: Mapping[str, Sequence[str]],
) -> list[str]:
    """Generate variations of a prompt by substituting keywords.

    The number of variations is the square root of the number of keywords,
    rounded. Variation ``i`` replaces every occurrence of each keyword with
    that keyword's replacement at index ``i`` (wrapping around). Keywords
    are applied in the mapping's iteration order, so a replacement that
    contains a later keyword is substituted again.

    Args:
        seed_prompt: The prompt to vary.
        substitutions: Keyword -> ordered list of replacements.

    Returns:
        The variations, in generation order. Empty when there are no
        substitutions.

    Raises:
        InvalidArgumentError: If any keyword has no replacements.
    """
    for keyword, replacements in substitutions.items():
        if not replacements:
            raise InvalidArgumentError(
                f"Keyword {keyword!r} needs at least one replacement."
            )

    prompts: list[str] = []
    for i in range(_variation_count(substitutions)):
        new_prompt = seed_prompt
        for keyword, replacements in substitutions.items():
            if not keyword:
                continue
            new_prompt = new_prompt.replace(keyword, replacements[i % len(replacements)])
        prompts.append(new_prompt)

    logger.debug(
        "Generated %d variation(s) from %d keyword(s)", len(prompts), len(substitutions)
    )
    return prompts
