"""Data-integrity checks."""

from checks.validation import validate_governance

__all__ = ["validate_governance"]
