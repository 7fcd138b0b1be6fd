"""
Rule-based grammar checking.

Runs the ordered pattern table from ``resources`` over the essay, then a few
structural heuristics (sentence capitalization, run-on sentences, repeated
words). Findings from different rules are never merged, so one span can be
reported more than once.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..models.analysis import DimensionScore, GrammarError, MAX_DIMENSION_SCORE
from .resources import (
    GRAMMAR_RULES,
    GrammarRule,
    CAPITALIZE_SENTENCE_MESSAGE,
    RUN_ON_MESSAGE,
    REPEATED_WORD_MESSAGE,
    RUN_ON_WORD_LIMIT,
    REPEATED_WORD_MIN_LENGTH,
)
from .tokenizer import get_sentence_spans, get_word_spans, get_words

logger = logging.getLogger(__name__)

MIN_WORDS = 5

# All scoring below is in half-points (1 == 0.5 marks).
MAX_HALF_POINTS = MAX_DIMENSION_SCORE * 2
PENALTY_PER_ERROR = 3
MAX_ERROR_PENALTY = 16

# (word count below, cap)
LENGTH_CAPS = ((15, 6), (30, 10), (50, 14))


@dataclass(frozen=True)
class GrammarResult:
    score: DimensionScore
    errors: Tuple[GrammarError, ...]


class GrammarChecker:
    """Applies pattern rules and structural heuristics to essay text."""

    def __init__(self, rules: Sequence[GrammarRule] = GRAMMAR_RULES):
        self.rules = tuple(rules)

    def find_errors(self, text: str) -> List[GrammarError]:
        errors = self._match_rules(text)
        errors.extend(self._check_sentence_capitalization(text))
        errors.extend(self._check_run_on_sentences(text))
        errors.extend(self._check_repeated_words(text))
        return errors

    def check(self, text: str, word_count: int) -> GrammarResult:
        if word_count < MIN_WORDS:
            return GrammarResult(DimensionScore(0), ())

        errors = self.find_errors(text)
        half_points = score_grammar(word_count, len(errors))
        logger.debug(f"Grammar: {len(errors)} issue(s) in {word_count} words, {half_points} half-points")
        return GrammarResult(DimensionScore(half_points), tuple(errors))

    def _match_rules(self, text: str) -> List[GrammarError]:
        errors = []
        for rule in self.rules:
            for match in rule.pattern.finditer(text):
                errors.append(GrammarError(
                    text=match.group(0),
                    position=match.start(),
                    suggestions=(rule.message,),
                ))
        return errors

    def _check_sentence_capitalization(self, text: str) -> List[GrammarError]:
        """Sentences after the first should open with a capital letter."""
        errors = []
        for start, end in get_sentence_spans(text):
            if start == 0:
                continue
            sentence = text[start:end]
            stripped = sentence.lstrip()
            if stripped[:1].islower() and stripped[:1].isascii():
                errors.append(GrammarError(
                    text=stripped[:10] + "...",
                    position=start + len(sentence) - len(stripped),
                    suggestions=(CAPITALIZE_SENTENCE_MESSAGE,),
                ))
        return errors

    def _check_run_on_sentences(self, text: str) -> List[GrammarError]:
        errors = []
        for start, end in get_sentence_spans(text):
            sentence = text[start:end]
            if len(get_words(sentence)) > RUN_ON_WORD_LIMIT:
                errors.append(GrammarError(
                    text=sentence[:30] + "...",
                    position=start,
                    suggestions=(RUN_ON_MESSAGE,),
                ))
        return errors

    def _check_repeated_words(self, text: str) -> List[GrammarError]:
        errors = []
        spans = get_word_spans(text)
        tokens = [text[s:e].lower() for s, e in spans]
        for i in range(len(tokens) - 1):
            word = tokens[i]
            if word == tokens[i + 1] and len(word) >= REPEATED_WORD_MIN_LENGTH:
                errors.append(GrammarError(
                    text=f"{word} {word}",
                    position=spans[i][0],
                    suggestions=(REPEATED_WORD_MESSAGE.format(word=word),),
                ))
        return errors


def score_grammar(word_count: int, error_count: int) -> int:
    """Grammar score in half-points (0-20)."""
    if word_count < MIN_WORDS:
        return 0

    score = MAX_HALF_POINTS - min(MAX_ERROR_PENALTY, error_count * PENALTY_PER_ERROR)

    # Error density is errors per ten words, with at least ten words assumed.
    # Compared as integers: errors * 10 / d against each threshold.
    d = max(word_count, 10)
    if error_count * 5 > d:           # > 2 per 10 words
        score -= 4
    elif error_count * 20 > d * 3:    # > 1.5
        score -= 3
    elif error_count * 10 > d:        # > 1
        score -= 2
    elif error_count * 20 > d:        # > 0.5
        score -= 1

    for limit, cap in LENGTH_CAPS:
        if word_count < limit:
            score = min(score, cap)
            break

    if word_count >= 100 and error_count == 0:
        score += 2
    elif word_count >= 200 and error_count <= 1:
        score += 1

    return max(0, min(MAX_HALF_POINTS, score))
