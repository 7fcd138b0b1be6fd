"""Prioritized remediation plan built from weak rubric dimensions."""

import logging
from typing import List, Sequence, Tuple

from ..models.analysis import (
    DimensionScore,
    GrammarError,
    ImprovementArea,
    half_points_to_score,
    MAX_DIMENSION_SCORE,
)
from ..scoring import aggregate_total, round_half_up

logger = logging.getLogger(__name__)

# Quality thresholds, in half-points
WORD_COUNT_THRESHOLD = 14
SPELLING_THRESHOLD = 16
GRAMMAR_THRESHOLD = 14
TYPING_THRESHOLD = 12
CONTENT_QUALITY_THRESHOLD = 30

SENTENCE_LENGTH_RANGE = (8, 25)
STRUCTURE_MIN_WORDS = 50
CONTENT_QUALITY_MIN_WORDS = 100

ARTICLE_TIP = 'Focus on correct article usage (a, an, the)'
POSSESSIVE_TIP = 'Practice distinguishing between contractions and possessives'


def _priority(half_points: int, high_below: int, medium_below: int) -> str:
    if half_points < high_below * 2:
        return 'high'
    if half_points < medium_below * 2:
        return 'medium'
    return 'low'


def _target(dimension: DimensionScore, step: int):
    return half_points_to_score(min(MAX_DIMENSION_SCORE * 2, dimension.half_points + step * 2))


def _word_count_copy(word_count: int) -> Tuple[str, Tuple[str, ...]]:
    if word_count < 50:
        return (
            'Your essay is too short. Aim for at least 150-200 words to properly develop your ideas.',
            (
                'Add more supporting examples and evidence',
                'Expand on your main points with detailed explanations',
                'Include introduction and conclusion paragraphs',
                'Use transitional sentences to connect ideas',
            ),
        )
    if word_count < 150:
        return (
            'Your essay needs more development. Add more content to reach the optimal length.',
            (
                'Provide more detailed examples',
                'Add a conclusion that summarizes your main points',
                'Include counterarguments or different perspectives',
                'Use more descriptive language and explanations',
            ),
        )
    return (
        'Your essay is too long. Focus on being more concise and direct.',
        (
            'Remove unnecessary repetition',
            'Combine related sentences',
            'Focus on the most important points',
            'Use stronger, more precise vocabulary',
        ),
    )


def _grammar_tips(grammar_errors: Sequence[GrammarError]) -> Tuple[str, ...]:
    tips = [
        'Review basic sentence structure rules',
        'Practice identifying subjects and verbs in sentences',
        'Learn the difference between active and passive voice',
        'Study common grammar patterns and rules',
    ]
    messages = [error.suggestions[0] for error in grammar_errors if error.suggestions]
    if any('article' in message for message in messages):
        tips.insert(0, ARTICLE_TIP)
    if any('pronoun' in message or 'possessive' in message for message in messages):
        tips.insert(0, POSSESSIVE_TIP)
    return tuple(tips)


def generate_improvement_areas(word_count: int,
                               sentence_count: int,
                               word_count_score: DimensionScore,
                               spelling: DimensionScore,
                               grammar: DimensionScore,
                               backspace: DimensionScore,
                               delete: DimensionScore,
                               grammar_errors: Sequence[GrammarError]) -> List[ImprovementArea]:
    """Build improvement areas and sort them high -> medium -> low.

    The sort is stable, so areas of equal priority keep generation order.
    """
    areas = []

    if word_count_score.half_points < WORD_COUNT_THRESHOLD:
        description, tips = _word_count_copy(word_count)
        areas.append(ImprovementArea(
            category='Word Count',
            priority=_priority(word_count_score.half_points, 3, 5),
            description=description,
            tips=tips,
            current_score=word_count_score.score,
            target_score=_target(word_count_score, 3),
        ))

    if spelling.half_points < SPELLING_THRESHOLD:
        areas.append(ImprovementArea(
            category='Spelling',
            priority=_priority(spelling.half_points, 4, 6),
            description='Your spelling accuracy needs improvement. Focus on commonly misspelled words.',
            tips=(
                'Use spell-check tools while writing',
                'Keep a personal dictionary of words you often misspell',
                'Read more to familiarize yourself with correct spellings',
                'Practice writing commonly misspelled words',
                'Proofread your work carefully before submitting',
            ),
            current_score=spelling.score,
            target_score=_target(spelling, 2),
        ))

    if grammar.half_points < GRAMMAR_THRESHOLD:
        areas.append(ImprovementArea(
            category='Grammar',
            priority=_priority(grammar.half_points, 3, 5),
            description=(
                f'Grammar issues detected in your essay. '
                f'{len(grammar_errors)} specific error(s) need attention.'
            ),
            tips=_grammar_tips(grammar_errors),
            current_score=grammar.score,
            target_score=_target(grammar, 3),
        ))

    if word_count >= STRUCTURE_MIN_WORDS and sentence_count > 0:
        low, high = SENTENCE_LENGTH_RANGE
        if word_count < low * sentence_count or word_count > high * sentence_count:
            areas.append(ImprovementArea(
                category='Structure',
                priority='medium',
                description='Your sentence structure could be improved for better readability.',
                tips=(
                    'Vary your sentence length for better flow',
                    'Use a mix of simple, compound, and complex sentences',
                    'Avoid run-on sentences that are difficult to follow',
                    'Start sentences with different words to create variety',
                    'Use transitional words to connect ideas',
                ),
                current_score=6,
                target_score=8,
            ))

    typing_half_points = min(backspace.half_points, delete.half_points)
    if typing_half_points < TYPING_THRESHOLD:
        areas.append(ImprovementArea(
            category='Typing Efficiency',
            priority='low',
            description='Your typing confidence could be improved through more practice.',
            tips=(
                'Plan your essay before you start typing',
                'Take time to think through your sentences',
                'Practice typing to improve fluency',
                'Use draft outlines to organize your thoughts',
                "Don't worry about perfection in the first draft",
            ),
            current_score=half_points_to_score(typing_half_points),
            target_score=8,
        ))

    core_total = aggregate_total((word_count_score, spelling, grammar))
    if word_count >= CONTENT_QUALITY_MIN_WORDS and core_total < CONTENT_QUALITY_THRESHOLD:
        areas.append(ImprovementArea(
            category='Content Quality',
            priority='high',
            description='Focus on improving the overall quality and clarity of your writing.',
            tips=(
                'Develop a clear thesis statement',
                'Support your arguments with specific examples',
                'Organize your ideas in logical paragraphs',
                'Use varied vocabulary to express your ideas',
                'Ensure each paragraph has a clear main idea',
                'Connect your ideas with appropriate transitions',
            ),
            # total is in half-points, so total / 3 marks == total / 6 half-points
            current_score=round_half_up(core_total, 6),
            target_score=8,
        ))

    areas.sort(key=lambda area: area.rank)
    logger.debug(f"Generated {len(areas)} improvement area(s)")
    return areas
