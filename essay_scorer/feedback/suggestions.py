"""Flat list of short writing tips."""

from typing import List

from ..models.analysis import DimensionScore

EMPTY_ESSAY_SUGGESTION = 'Please write a substantial essay to receive meaningful feedback.'
FALLBACK_SUGGESTION = 'Keep writing to receive more detailed feedback and suggestions for improvement.'


def _word_count_suggestion(word_count: int):
    if word_count < 20:
        return 'Your essay is too short. Aim for at least 150-200 words to develop your ideas properly.'
    if word_count < 50:
        return 'Try to expand your essay with more supporting details, examples, and explanations.'
    if word_count < 100:
        return 'Good start! Add more paragraphs to develop your arguments and provide evidence.'
    if word_count < 200:
        return 'Your essay is developing well. Consider adding a conclusion or more supporting details.'
    if word_count > 600:
        return 'Your essay is quite long. Focus on the most important points and remove unnecessary details.'
    return None


def _spelling_suggestion(word_count: int, spelling: DimensionScore):
    if spelling.half_points == 0 and word_count < 10:
        return 'Write more content to receive spelling feedback.'
    if spelling.half_points < 8:
        return 'Focus on spelling accuracy. Use spell-check tools and proofread carefully.'
    if spelling.half_points < 14:
        return 'Good spelling overall, but double-check commonly misspelled words.'
    return None


def _grammar_suggestion(word_count: int, grammar: DimensionScore):
    if grammar.half_points == 0 and word_count < 10:
        return 'Write more content to receive grammar feedback.'
    if grammar.half_points < 6:
        return 'Review basic grammar rules, especially sentence structure and punctuation.'
    if grammar.half_points < 12:
        return 'Pay attention to grammar details like article usage (a/an/the) and pronoun consistency.'
    if grammar.half_points < 16:
        return 'Good grammar foundation. Review any highlighted errors for improvement.'
    return None


def generate_suggestions(word_count: int, spelling: DimensionScore,
                         grammar: DimensionScore, grammar_error_count: int) -> List[str]:
    """Build the suggestion list. Never returns an empty list."""
    suggestions = [
        line for line in (
            _word_count_suggestion(word_count),
            _spelling_suggestion(word_count, spelling),
            _grammar_suggestion(word_count, grammar),
        )
        if line
    ]

    if grammar_error_count > 0:
        suggestions.append(f'Address the {grammar_error_count} grammar issue(s) highlighted in your essay.')

    if word_count >= 200 and spelling.half_points >= 16 and grammar.half_points >= 16:
        suggestions.append(
            'Excellent work! Your essay demonstrates strong writing skills. '
            'Consider adding more sophisticated vocabulary or complex sentence structures.'
        )
    elif word_count >= 100 and spelling.half_points >= 12 and grammar.half_points >= 12:
        suggestions.append('Good progress! Focus on expanding your ideas while maintaining accuracy.')

    if not suggestions:
        suggestions.append(FALLBACK_SUGGESTION)

    return suggestions
