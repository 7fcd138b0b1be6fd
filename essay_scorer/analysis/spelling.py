"""Dictionary-based spelling checker and spelling accuracy scorer."""

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import List, Mapping, Tuple

from ..models.analysis import DimensionScore, SpellingError, MAX_DIMENSION_SCORE
from .resources import MISSPELLINGS
from .tokenizer import letters_only

logger = logging.getLogger(__name__)

MIN_WORDS = 5
MIN_LETTERS = 3

# (minimum error rate, score), checked in order
ERROR_RATE_BANDS = (
    (Fraction(30, 100), 1),
    (Fraction(20, 100), 3),
    (Fraction(15, 100), 4),
    (Fraction(10, 100), 5),
    (Fraction(8, 100), 6),
    (Fraction(5, 100), 7),
    (Fraction(3, 100), 8),
)
FALLBACK_SCORE = 9

# (word count below, score cap)
LENGTH_CAPS = ((15, 3), (30, 6), (50, 8))

BONUS_MIN_WORDS = 100
BONUS_MIN_ACCURACY = Fraction(98, 100)


@dataclass(frozen=True)
class SpellingResult:
    score: DimensionScore
    valid_words: int
    errors: Tuple[SpellingError, ...]

    @property
    def misspelled_count(self) -> int:
        return len(self.errors)


class SpellingChecker:
    """Flags tokens found in a static misspelling dictionary."""

    def __init__(self, dictionary: Mapping[str, str] = MISSPELLINGS):
        self.dictionary = dictionary

    def find_errors(self, words: List[str],
                    spans: List[Tuple[int, int]]) -> Tuple[int, List[SpellingError]]:
        """Return the number of checkable words and the misspellings among them."""
        valid_words = 0
        errors = []
        for word, (start, _) in zip(words, spans):
            clean = letters_only(word)
            if len(clean) < MIN_LETTERS:
                continue
            valid_words += 1
            correction = self.dictionary.get(clean)
            if correction is not None:
                errors.append(SpellingError(word=word, position=start, correction=correction))
        return valid_words, errors

    def check(self, words: List[str], spans: List[Tuple[int, int]]) -> SpellingResult:
        if len(words) < MIN_WORDS:
            return SpellingResult(DimensionScore.from_score(0), 0, ())

        valid_words, errors = self.find_errors(words, spans)
        score = score_spelling(len(words), valid_words, len(errors))
        logger.debug(f"Spelling: {len(errors)} misspelled of {valid_words} checked words, score {score}")
        return SpellingResult(DimensionScore.from_score(score), valid_words, tuple(errors))


def score_spelling(word_count: int, valid_words: int, misspelled: int) -> int:
    """Spelling accuracy score on the 0-10 scale."""
    if word_count < MIN_WORDS or valid_words == 0:
        return 0

    if misspelled == 0:
        score = MAX_DIMENSION_SCORE
    else:
        error_rate = Fraction(misspelled, valid_words)
        score = next(
            (band_score for threshold, band_score in ERROR_RATE_BANDS if error_rate >= threshold),
            FALLBACK_SCORE,
        )

    for limit, cap in LENGTH_CAPS:
        if word_count < limit:
            score = min(score, cap)
            break

    accuracy = Fraction(valid_words - misspelled, valid_words)
    if word_count >= BONUS_MIN_WORDS and accuracy >= BONUS_MIN_ACCURACY:
        score = min(MAX_DIMENSION_SCORE, score + 1)

    return max(0, min(MAX_DIMENSION_SCORE, score))
