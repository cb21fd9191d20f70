"""Object-style access to the nanoprompt operations."""

from __future__ import annotations

from typing import Mapping, Sequence

from nanoprompt.analyzer import AnalysisResult, analyze
from nanoprompt.enhancer import enhance
from nanoprompt.resources import PREMIUM_URL
from nanoprompt.variations import generate_variations


class PromptProcessor:
    """Enhance, analyze, and generate variations of prompts.

    Holds no state; every method is a thin wrapper over the module-level
    function of the same purpose, so one instance can be shared freely.
    """

    PREMIUM_URL = PREMIUM_URL

    def enhance_prompt(
        self,
        base_prompt: str,
        enhancements: Sequence[str],
        weights: Sequence[float],
    ) -> str:
        return enhance(base_prompt, enhancements, weights)

    def analyze_prompt(self, prompt: str) -> AnalysisResult:
        return analyze(prompt)

    def generate_prompt_variations(
        self,
        seed_prompt: str,
        keyword_substitutions: Mapping[str, Sequence[str]],
    ) -> list[str]:
        return generate_variations(seed_prompt, keyword_substitutions)

    def get_premium_url(self) -> str:
        return self.PREMIUM_URL
