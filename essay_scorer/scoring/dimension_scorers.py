"""Length-driven dimension scorers."""

import logging
from abc import ABC, abstractmethod

from ..models.analysis import DimensionScore, MAX_DIMENSION_SCORE

logger = logging.getLogger(__name__)


def round_half_up(numerator: int, denominator: int) -> int:
    """Round numerator/denominator to the nearest integer, halves away from zero."""
    if numerator < 0:
        return -round_half_up(-numerator, denominator)
    return (2 * numerator + denominator) // (2 * denominator)


class DimensionScorer(ABC):
    """Abstract base class for scorers driven by essay word count."""

    @abstractmethod
    def calculate_score(self, word_count: int) -> int:
        """Calculate an integer 0-10 score for the given word count."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get the dimension name."""
        pass

    def score(self, word_count: int) -> DimensionScore:
        value = max(0, min(MAX_DIMENSION_SCORE, self.calculate_score(word_count)))
        return DimensionScore.from_score(value)


class WordCountScorer(DimensionScorer):
    """Rewards the 300-500 word range and penalizes both short and long essays."""

    def calculate_score(self, word_count: int) -> int:
        wc = word_count
        if wc <= 0:
            return 0
        if wc < 15:
            return round_half_up(wc, 30)                      # 0-0.5
        if wc < 30:
            return round_half_up(wc - 10, 10)                 # 0.5-2
        if wc < 75:
            return 2 + round_half_up(2 * (wc - 30), 45)       # 2-4
        if wc < 150:
            return 4 + round_half_up(wc - 75, 25)             # 4-7
        if wc < 300:
            return 7 + round_half_up(wc - 150, 75)            # 7-9
        if wc <= 500:
            return 9 + round_half_up(wc - 300, 200)           # 9-10, optimal
        if wc <= 700:
            return max(7, 10 - round_half_up(wc - 500, 100))  # getting too long
        return max(3, 7 - round_half_up(wc - 700, 100))       # too long

    def get_name(self) -> str:
        return "wordCount"


class TypingEfficiencyScorer(DimensionScorer):
    """Step function of essay length standing in for keystroke telemetry.

    Scores 1 through 9 as the essay grows; the same curve is used for both the
    backspace and the delete dimension.
    """

    # (word count below, score)
    BANDS = ((10, 1), (25, 2), (50, 3), (100, 5), (200, 7), (400, 8))
    TOP_SCORE = 9

    def __init__(self, name: str):
        self.name = name

    def calculate_score(self, word_count: int) -> int:
        for limit, band_score in self.BANDS:
            if word_count < limit:
                return band_score
        return self.TOP_SCORE

    def get_name(self) -> str:
        return self.name
