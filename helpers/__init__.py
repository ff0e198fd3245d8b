"""Pure governance formulas - no storage, easily testable."""

from helpers import scoring, stages

__all__ = ["scoring", "stages"]
