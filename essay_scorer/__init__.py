"""Explainable essay scoring against a fixed five-dimension rubric.

Core Modules:
- analysis: Tokenization, dictionary spelling checks and rule-based grammar checks
- scoring: Word-count and typing-efficiency curves, rubric aggregation
- feedback: Prioritized improvement areas and writing suggestions
- models: Immutable analysis records
- storage: File-backed essay history per user
- cli: Command-line interface
- utils: JSON and CSV export helpers

Usage:
    Single essay:
        from essay_scorer import analyze_essay
        analysis = analyze_essay(text)
        analysis.to_dict()

    Batch processing:
        from essay_scorer import EssayAnalyzer
        df = EssayAnalyzer().analyze_batch([{'essay_id': 1, 'essay_text': text}])

    CLI usage:
        essay-scorer analyze essay.txt
"""

__version__ = "1.0.0"

from .analyzer import EssayAnalyzer, analyze_essay
from .models import EssayAnalysis, DimensionScore, GrammarError, ImprovementArea, SpellingError

__all__ = [
    'EssayAnalyzer',
    'analyze_essay',
    'EssayAnalysis',
    'DimensionScore',
    'GrammarError',
    'ImprovementArea',
    'SpellingError',
]
