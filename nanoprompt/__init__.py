"""nanoprompt - Small helpers for enhancing, analyzing, and varying prompts.

Pick the best of several weighted prompt extensions, get heuristic clarity
feedback, or generate prompt variants by keyword substitution -- all local,
deterministic, and without an API key.
"""

from nanoprompt.analyzer import AnalysisResult, analyze
from nanoprompt.enhancer import enhance, rank_enhancements
from nanoprompt.exceptions import InvalidArgumentError, NanoPromptError
from nanoprompt.processor import PromptProcessor
from nanoprompt.resources import PREMIUM_URL, get_premium_url
from nanoprompt.variations import generate_variations

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "InvalidArgumentError",
    "NanoPromptError",
    "PREMIUM_URL",
    "PromptProcessor",
    "analyze",
    "enhance",
    "generate_variations",
    "get_premium_url",
    "rank_enhancements",
]
