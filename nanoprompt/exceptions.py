"""Exceptions raised by nanoprompt."""


class NanoPromptError(Exception):
    """Base class for all nanoprompt errors."""


class InvalidArgumentError(NanoPromptError, ValueError):
    """Raised when an operation receives input it cannot process.

    Covers mismatched enhancement/weight counts, an empty enhancement list,
    weights that sum to zero, and an empty replacement list for a keyword.
    """
