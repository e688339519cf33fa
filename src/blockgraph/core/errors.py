"""Exceptions raised by the resolver core and the analysis collaborators."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """The caller supplied input the resolver cannot work with.

    Raised for a missing block list, a payload without ``Blocks`` and
    rejected uploads. Everything else in the block graph degrades
    gracefully instead of raising.
    """


class AnalysisError(RuntimeError):
    """A remote collaborator (document analysis, face matching) failed."""
