import re
import unittest

from essay_scorer.analysis import GrammarChecker, SpellingChecker, score_grammar, score_spelling
from essay_scorer.analysis.resources import GRAMMAR_RULES, MISSPELLINGS
from essay_scorer.analysis.tokenizer import (
    get_sentence_spans,
    get_word_spans,
    get_words,
    letters_only,
    normalize_text,
)

from essay_samples import make_essay


class TestTokenizer(unittest.TestCase):
    def test_text_normalization_quotes_dashes(self):
        text = '“Smart”—it’s “ok”.'
        norm = normalize_text(text)
        self.assertIn('"', norm)
        self.assertIn('-', norm)
        self.assertIn("'", norm)
        self.assertEqual(len(norm), len(text))

    def test_whitespace_split_drops_empty_tokens(self):
        self.assertEqual(get_words("  one\ttwo \n\n three  "), ['one', 'two', 'three'])
        self.assertEqual(get_words(""), [])

    def test_word_spans_match_tokens(self):
        text = "Don't  do well-being poorly"
        for word, (start, end) in zip(get_words(text), get_word_spans(text)):
            self.assertEqual(text[start:end], word)

    def test_letters_only(self):
        self.assertEqual(letters_only("Teh,"), "teh")
        self.assertEqual(letters_only("'42'"), "")

    def test_sentence_spans(self):
        text = "First one. second one!! Third?"
        sentences = [text[s:e].strip() for s, e in get_sentence_spans(text)]
        self.assertEqual(sentences, ["First one", "second one", "Third"])
        self.assertEqual(get_sentence_spans("..."), [])


class TestSpellingChecker(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.checker = SpellingChecker()

    def check(self, text):
        return self.checker.check(get_words(text), get_word_spans(text))

    def test_dictionary_is_read_only(self):
        with self.assertRaises(TypeError):
            MISSPELLINGS['teh'] = 'tea'

    def test_context_words_are_table_entries(self):
        result = self.check(make_essay(40) + " There was rain then.")
        self.assertEqual([e.correction for e in result.errors], ['their', 'than'])
        self.assertEqual(MISSPELLINGS['loose'], 'lose')
        self.assertEqual(MISSPELLINGS['affect'], 'effect')
        self.assertNotIn('realy', MISSPELLINGS)

    def test_case_insensitive_lookup(self):
        result = self.check(make_essay(40) + " TEH Recieve.")
        self.assertEqual([e.correction for e in result.errors], ['the', 'receive'])

    def test_short_tokens_not_counted(self):
        valid, errors = self.checker.find_errors(['a', 'is', 'on', 'teh'], [(0, 1), (2, 4), (5, 7), (8, 11)])
        self.assertEqual(valid, 1)
        self.assertEqual(len(errors), 1)

    def test_error_rate_bands(self):
        # (misspelled, valid, expected) with 60 words so no length cap applies
        cases = [
            (0, 50, 10),
            (15, 50, 1),
            (10, 50, 3),
            (8, 50, 4),
            (5, 50, 5),
            (4, 50, 6),
            (3, 50, 7),
            (2, 50, 8),
            (1, 50, 9),
        ]
        for misspelled, valid, expected in cases:
            self.assertEqual(score_spelling(60, valid, misspelled), expected, (misspelled, valid))

    def test_length_caps(self):
        self.assertEqual(score_spelling(10, 8, 0), 3)
        self.assertEqual(score_spelling(20, 15, 0), 6)
        self.assertEqual(score_spelling(40, 30, 0), 8)
        self.assertEqual(score_spelling(4, 4, 0), 0)
        self.assertEqual(score_spelling(10, 0, 0), 0)

    def test_long_accurate_essay_bonus(self):
        # 1 error in 100 valid words is 99% accurate: band 9 plus the bonus
        self.assertEqual(score_spelling(120, 100, 1), 10)
        # 3 errors in 100 is below the accuracy bar
        self.assertEqual(score_spelling(120, 100, 3), 8)


class TestGrammarChecker(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.checker = GrammarChecker()

    def messages(self, text):
        return [e.suggestions[0] for e in self.checker.find_errors(text)]

    def test_rule_table_integrity(self):
        names = [rule.name for rule in GRAMMAR_RULES]
        self.assertEqual(len(names), len(set(names)))
        for rule in GRAMMAR_RULES:
            self.assertIsInstance(rule.pattern, re.Pattern)
            self.assertTrue(rule.message)

    def test_clean_text_has_no_errors(self):
        self.assertEqual(self.checker.find_errors(make_essay(400)), [])

    def test_rule_hits(self):
        cases = {
            "We saw a elephant today.": 'Use "an" before words starting with vowel sounds',
            "She bought an car today.": 'Use "a" before words starting with consonant sounds',
            "Your going home now.": 'Use "you\'re" (you are) instead of "your" (possessive)',
            "They could of won.": 'Use "could have" instead of "could of"',
            "Yesterday i went home.": 'Capitalize "I" when used as a pronoun',
            "They was late again.": 'Use "are" or "were" with plural subjects (they/we/you)',
            "We loose focus quickly.": 'Use "lose" (verb) instead of "loose" (adjective meaning not tight)',
            "We went to store early.": 'Consider adding an article (a/an/the) before the noun',
        }
        for text, message in cases.items():
            self.assertIn(message, self.messages(text), text)

    def test_affect_rule_spans_to_last_article(self):
        text = "The affect of the rain was big and the affect the storm had on a town was bigger."
        hits = [e for e in self.checker.find_errors(text) if e.suggestions[0].startswith('Consider "effect"')]
        self.assertEqual(len(hits), 1)
        self.assertEqual(hits[0].position, text.index('affect'))
        self.assertTrue(hits[0].text.endswith('a town'))

    def test_doubled_conjunction_matches_word_prefix(self):
        messages = self.messages("We walked home and sometimes we ran.")
        self.assertEqual(messages.count('Consider breaking this into separate sentences to avoid run-on sentences'), 1)

    def test_dependent_clause_opener(self):
        messages = self.messages("The game ended. Because it rained all day.")
        self.assertIn('This sentence seems incomplete - dependent clauses need an independent clause', messages)

    def test_full_missing_article_noun_list(self):
        for text in ("We went to school early.", "She is at work.", "They stayed in college."):
            self.assertIn('Consider adding an article (a/an/the) before the noun', self.messages(text), text)

    def test_correct_lose_is_still_reported(self):
        self.assertIn('Use "lose" (verb) - this usage is correct', self.messages("We lose focus quickly."))

    def test_lowercase_sentence_start(self):
        text = "The day began. the night ended."
        errors = self.checker.find_errors(text)
        messages = [e.suggestions[0] for e in errors]
        self.assertIn('Capitalize the first letter after a period', messages)
        self.assertIn('Capitalize the first letter of each sentence', messages)
        heuristic = next(e for e in errors if e.suggestions[0] == 'Capitalize the first letter of each sentence')
        self.assertEqual(heuristic.position, text.index('the night'))

    def test_run_on_sentence(self):
        text = " ".join(["Word"] + ["alpha", "beta", "gamma"] * 9) + "."
        self.assertIn('Consider breaking this long sentence into smaller ones', self.messages(text))

    def test_repeated_words(self):
        errors = self.checker.find_errors("The cat sat on the the mat and the dog dog slept.")
        repeated = [e for e in errors if e.suggestions[0].startswith('Remove repeated word')]
        self.assertEqual(len(repeated), 2)
        self.assertEqual(repeated[0].text, "the the")
        self.assertEqual(repeated[1].suggestions[0], "Remove repeated word: dog")

    def test_overlapping_findings_not_merged(self):
        # Flagged by both the pattern rule and the sentence heuristic
        messages = self.messages("It rained. then it stopped.")
        self.assertIn('Capitalize the first letter after a period', messages)
        self.assertIn('Capitalize the first letter of each sentence', messages)

    def test_short_text_scores_zero(self):
        result = self.checker.check("too short here", 3)
        self.assertEqual(result.score.score, 0)
        self.assertEqual(result.errors, ())


class TestGrammarScore(unittest.TestCase):
    def test_perfect_long_essay(self):
        self.assertEqual(score_grammar(150, 0), 20)

    def test_error_penalty_and_density(self):
        # 1 error in 100 words: -1.5, density 0.1 -> no density penalty
        self.assertEqual(score_grammar(100, 1), 17)
        # 4 errors in 40 words: -6, density exactly 1 -> -0.5
        self.assertEqual(score_grammar(40, 4), 7)
        # 10 errors in 40 words: -8 (capped), density 2.5 -> -2
        self.assertEqual(score_grammar(40, 10), 0)

    def test_half_point_bonus(self):
        # 1 error in 200 words: 10 - 1.5 + 0.5 = 9
        self.assertEqual(score_grammar(200, 1), 18)

    def test_length_caps(self):
        self.assertEqual(score_grammar(10, 0), 6)
        self.assertEqual(score_grammar(20, 0), 10)
        self.assertEqual(score_grammar(45, 0), 14)
        self.assertEqual(score_grammar(4, 0), 0)


if __name__ == '__main__':
    unittest.main()
