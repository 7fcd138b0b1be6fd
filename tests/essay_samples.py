"""Sample essay text shared by the test modules."""

# Every sentence here avoids the misspelling table and every grammar rule,
# dependent-clause openers included.
CLEAN_SENTENCES = (
    "Students learn best with clear feedback from teachers on each draft.",
    "Reading widely helps writers build a rich vocabulary over many years.",
    "Careful planning makes every paragraph stronger and more focused.",
    "Good essays present one main idea with supporting evidence.",
    "Revision gives writers a chance to improve weak sentences.",
    "Libraries offer quiet spaces where people can study for hours.",
    "A strong conclusion reminds readers why the topic matters.",
)

CLEAN_WORDS = " ".join(CLEAN_SENTENCES).split()


def make_essay(word_count: int) -> str:
    """Clean essay text with exactly ``word_count`` words, ending in a period."""
    words = [CLEAN_WORDS[i % len(CLEAN_WORDS)] for i in range(word_count)]
    if words and not words[-1].endswith('.'):
        words[-1] += '.'
    return " ".join(words)
