"""
Pitch errors.

All of these are caller-input errors: they are raised immediately at the
point of invalid input and never retried or defaulted.
"""

from __future__ import annotations


class PitchError(ValueError):
    """Base class for invalid pitch/interval input."""


class UnknownLetterNameError(PitchError):
    """A letter name outside C-B was requested from the registry."""


class InvalidQualityCombinationError(PitchError):
    """No interval quality exists for an (interval type, offset) pair."""


class IncompatibleQualityError(PitchError):
    """An interval's quality does not belong to its perfect/major family."""
