"""Text analysis: tokenization, spelling and grammar checking."""

from .grammar import GrammarChecker, GrammarResult, score_grammar
from .spelling import SpellingChecker, SpellingResult, score_spelling
from .tokenizer import get_words, get_word_spans, get_sentence_spans, count_sentences, normalize_text

__all__ = [
    'GrammarChecker',
    'GrammarResult',
    'SpellingChecker',
    'SpellingResult',
    'score_grammar',
    'score_spelling',
    'get_words',
    'get_word_spans',
    'get_sentence_spans',
    'count_sentences',
    'normalize_text',
]
