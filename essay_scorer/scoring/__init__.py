"""Rubric dimension scoring.

This module contains the length-driven scorers (word count, typing
efficiency) and the aggregation of dimension scores into rubric totals.
Spelling and grammar scores are produced by their checkers in ``analysis``.
"""

from .dimension_scorers import (
    DimensionScorer,
    WordCountScorer,
    TypingEfficiencyScorer,
    round_half_up,
)
from ..models.analysis import aggregate_total

__all__ = [
    'DimensionScorer',
    'WordCountScorer',
    'TypingEfficiencyScorer',
    'aggregate_total',
    'round_half_up',
]
