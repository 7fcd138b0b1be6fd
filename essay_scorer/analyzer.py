"""
Main EssayAnalyzer class for scoring essays against the five-dimension rubric.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from math import ceil
from typing import Any, Dict, List, Optional

import pandas as pd

from .analysis import GrammarChecker, SpellingChecker
from .analysis.tokenizer import count_sentences, get_word_spans, get_words, normalize_text
from .config import AnalysisConfig
from .feedback import EMPTY_ESSAY_SUGGESTION, generate_improvement_areas, generate_suggestions
from .models.analysis import DimensionScore, EssayAnalysis
from .scoring import TypingEfficiencyScorer, WordCountScorer
from .utils.output_formatters import flatten_analysis

MIN_TEXT_LENGTH = 10


class EssayAnalyzer:
    """
    Scores essays and builds feedback.

    The analyzer holds only read-only tables, so one instance can serve
    concurrent callers.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()
        self.logger = logging.getLogger(__name__)

        self.spelling_checker = SpellingChecker()
        self.grammar_checker = GrammarChecker()
        self.word_count_scorer = WordCountScorer()
        self.backspace_scorer = TypingEfficiencyScorer('backspaceScore')
        self.delete_scorer = TypingEfficiencyScorer('deleteScore')

    def analyze(self, essay_text: str) -> EssayAnalysis:
        """
        Score one essay.

        Args:
            essay_text: The submitted essay. Any value is accepted; non-strings
                are converted with ``str()``.

        Returns:
            A fully populated EssayAnalysis.
        """
        text = normalize_text(essay_text)
        words = get_words(text)
        word_count = len(words)

        if word_count == 0 or len(text.strip()) < MIN_TEXT_LENGTH:
            self.logger.debug("Essay too short to analyze, returning empty analysis")
            return self._empty_analysis()

        word_count_score = self.word_count_scorer.score(word_count)
        spelling = self.spelling_checker.check(words, get_word_spans(text))
        grammar = self.grammar_checker.check(text, word_count)
        backspace = self.backspace_scorer.score(word_count)
        delete = self.delete_scorer.score(word_count)

        suggestions = generate_suggestions(
            word_count, spelling.score, grammar.score, len(grammar.errors)
        )
        improvement_areas = generate_improvement_areas(
            word_count=word_count,
            sentence_count=count_sentences(text),
            word_count_score=word_count_score,
            spelling=spelling.score,
            grammar=grammar.score,
            backspace=backspace,
            delete=delete,
            grammar_errors=grammar.errors,
        )

        analysis = EssayAnalysis(
            word_count=word_count_score,
            spelling_accuracy=spelling.score,
            grammar_evaluation=grammar.score,
            backspace_score=backspace,
            delete_score=delete,
            grammar_errors=grammar.errors,
            suggestions=tuple(suggestions),
            improvement_areas=tuple(improvement_areas),
            spelling_errors=spelling.errors if self.config.include_spelling_errors else (),
        )
        self.logger.debug(f"Analyzed essay of {word_count} words: {analysis.total_marks}/{analysis.max_total_marks}")
        return analysis

    def _empty_analysis(self) -> EssayAnalysis:
        zero = DimensionScore(0)
        return EssayAnalysis(
            word_count=zero,
            spelling_accuracy=zero,
            grammar_evaluation=zero,
            backspace_score=zero,
            delete_score=zero,
            suggestions=(EMPTY_ESSAY_SUGGESTION,),
        )

    def analyze_batch(
        self,
        essays: List[Dict[str, Any]],
        show_progress: Optional[bool] = None
    ) -> pd.DataFrame:
        """
        Analyze a batch of essays.

        Args:
            essays: List of dictionaries with key 'essay_text' and optionally
                   'essay_id'
            show_progress: Whether to show a progress bar (defaults to config)

        Returns:
            DataFrame with one flattened analysis row per essay, in input order
        """
        from tqdm import tqdm

        if show_progress is None:
            show_progress = self.config.show_progress

        total = len(essays)
        if total == 0:
            return pd.DataFrame()

        chunk_size = max(1, self.config.parallelism)
        num_chunks = ceil(total / chunk_size)
        rows: List[Dict[str, Any]] = []

        pbar = tqdm(total=total, desc="Analyzing essays") if show_progress else None

        def _task(idx: int, essay_data: Dict[str, Any]) -> Dict[str, Any]:
            analysis = self.analyze(essay_data.get('essay_text', ''))
            row = {'essay_id': essay_data.get('essay_id', idx)}
            row.update(flatten_analysis(analysis))
            return row

        with ThreadPoolExecutor(max_workers=chunk_size) as executor:
            for c in range(num_chunks):
                start = c * chunk_size
                batch = essays[start:start + chunk_size]
                # map preserves submission order
                for row in executor.map(_task, range(start, start + len(batch)), batch):
                    rows.append(row)
                    if pbar is not None:
                        pbar.update(1)

        if pbar is not None:
            pbar.close()

        self.logger.info(f"Analyzed {total} essays")
        return pd.DataFrame(rows)


_default_analyzer = EssayAnalyzer()


def analyze_essay(text: str) -> EssayAnalysis:
    """Score an essay with the default analyzer."""
    return _default_analyzer.analyze(text)
