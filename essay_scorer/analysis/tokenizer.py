"""Word and sentence segmentation for essay analysis."""

import re
from typing import List, Tuple

from nltk.tokenize import RegexpTokenizer, WhitespaceTokenizer

_word_tokenizer = WhitespaceTokenizer()
_sentence_tokenizer = RegexpTokenizer(r'[.!?]+', gaps=True)

# One-to-one character mappings only, so offsets into the normalized text
# are also offsets into the submitted text.
_PUNCTUATION_MAP = str.maketrans({
    '“': '"', '”': '"', '„': '"', '‟': '"',
    '‘': "'", '’': "'", '‚': "'", '‛': "'",
    '–': '-', '—': '-', '−': '-',
})

_NON_LETTERS = re.compile(r'[^a-z]')


def normalize_text(text) -> str:
    """Map curly quotes and dashes to ASCII without changing text length."""
    if not isinstance(text, str):
        text = str(text)
    return text.translate(_PUNCTUATION_MAP)


def get_words(text: str) -> List[str]:
    """Split on whitespace, dropping empty tokens."""
    return _word_tokenizer.tokenize(text)


def get_word_spans(text: str) -> List[Tuple[int, int]]:
    """Character spans of the tokens returned by ``get_words``."""
    return list(_word_tokenizer.span_tokenize(text))


def letters_only(word: str) -> str:
    """Lower-case a token and strip everything but ASCII letters."""
    return _NON_LETTERS.sub('', word.lower())


def get_sentence_spans(text: str) -> List[Tuple[int, int]]:
    """Spans of the segments between runs of terminal punctuation.

    Whitespace-only segments are dropped.
    """
    return [
        (start, end) for start, end in _sentence_tokenizer.span_tokenize(text)
        if text[start:end].strip()
    ]


def count_sentences(text: str) -> int:
    return len(get_sentence_spans(text))
