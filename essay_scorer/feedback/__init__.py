"""Feedback generation: improvement areas and writing suggestions."""

from .improvement_areas import generate_improvement_areas
from .suggestions import generate_suggestions, EMPTY_ESSAY_SUGGESTION

__all__ = ['generate_improvement_areas', 'generate_suggestions', 'EMPTY_ESSAY_SUGGESTION']
