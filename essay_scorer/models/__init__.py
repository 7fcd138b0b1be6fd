"""Data records produced by the essay analyzer and the essay store."""

from .analysis import (
    DimensionScore,
    EssayAnalysis,
    GrammarError,
    ImprovementArea,
    SpellingError,
    MAX_DIMENSION_SCORE,
    MAX_TOTAL_MARKS,
    PRIORITY_RANK,
)
from .essay import create_essay_record, generate_title

__all__ = [
    'DimensionScore',
    'EssayAnalysis',
    'GrammarError',
    'ImprovementArea',
    'SpellingError',
    'MAX_DIMENSION_SCORE',
    'MAX_TOTAL_MARKS',
    'PRIORITY_RANK',
    'create_essay_record',
    'generate_title',
]
