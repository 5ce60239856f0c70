"""Error types raised by sunflux."""

from __future__ import annotations


class ValidationError(ValueError):
    """Input lies outside the domain a computation is defined for."""
