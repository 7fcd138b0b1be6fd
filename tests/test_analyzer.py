import json
import unittest

from essay_scorer import analyze_essay, EssayAnalyzer
from essay_scorer.config import AnalysisConfig
from essay_scorer.feedback import EMPTY_ESSAY_SUGGESTION
from essay_scorer.models import PRIORITY_RANK

from essay_samples import make_essay


class TestAnalyzeEssayScenarios(unittest.TestCase):
    def test_empty_text(self):
        analysis = analyze_essay("")
        self.assertEqual(analysis.total_marks, 0)
        self.assertEqual(list(analysis.suggestions), [EMPTY_ESSAY_SUGGESTION])
        self.assertTrue(analysis.suggestions[0].startswith("Please write a substantial essay"))
        self.assertEqual(analysis.improvement_areas, ())
        self.assertEqual(analysis.grammar_errors, ())

    def test_whitespace_and_tiny_text_score_zero(self):
        for text in ["   \n\t  ", "Hi there", "a b c"]:
            analysis = analyze_essay(text)
            for name, dim in analysis.dimensions.items():
                self.assertEqual(dim.score, 0, f"{name} should be 0 for {text!r}")
            self.assertEqual(analysis.total_marks, 0)
            self.assertEqual(list(analysis.suggestions), [EMPTY_ESSAY_SUGGESTION])

    def test_fewer_than_five_words_zeroes_spelling_and_grammar(self):
        analysis = analyze_essay("Teh recieve wierd words")
        self.assertEqual(analysis.spelling_accuracy.score, 0)
        self.assertEqual(analysis.grammar_evaluation.score, 0)
        self.assertEqual(analysis.grammar_errors, ())
        self.assertGreater(analysis.backspace_score.score, 0)

    def test_clean_300_word_essay(self):
        analysis = analyze_essay(make_essay(300))
        self.assertEqual(analysis.grammar_errors, ())
        self.assertEqual(analysis.spelling_accuracy.score, 10)
        self.assertGreaterEqual(analysis.grammar_evaluation.score, 9)
        self.assertIn(analysis.word_count.score, (9, 10))

    def test_should_of_reported_once(self):
        text = make_essay(95) + " We should of planned ahead."
        analysis = analyze_essay(text)
        self.assertEqual(len(analysis.grammar_errors), 1)
        error = analysis.grammar_errors[0]
        self.assertEqual(error.suggestions[0], 'Use "should have" instead of "should of"')
        self.assertEqual(text[error.position:error.position + len(error.text)], error.text)

    def test_teh_lowers_spelling(self):
        analysis = analyze_essay(make_essay(60) + " Teh end arrived.")
        self.assertLess(analysis.spelling_accuracy.score, 10)
        self.assertEqual(analysis.spelling_errors[0].correction, 'the')

    def test_context_word_lowers_spelling(self):
        analysis = analyze_essay(make_essay(60) + " There was rain.")
        self.assertEqual(analysis.spelling_accuracy.score, 9)
        self.assertEqual(analysis.spelling_errors[0].correction, 'their')

    def test_very_long_essay_penalized(self):
        analysis = analyze_essay(make_essay(1000))
        self.assertLessEqual(analysis.word_count.score, 7)


class TestAnalyzeEssayProperties(unittest.TestCase):
    SAMPLES = [
        "",
        "short",
        "i think its going to be alot better then i thought. she are happy",
        make_essay(20) + " your going to loose weight and and more.",
        make_essay(120),
        make_essay(450),
        make_essay(2500),
        "word " * 40,
        "Teh recieve wierd seperate definately " * 30,
    ]

    def test_scores_bounded(self):
        for text in self.SAMPLES:
            analysis = analyze_essay(text)
            self.assertGreaterEqual(analysis.total_marks, 0)
            self.assertLessEqual(analysis.total_marks, 50)
            self.assertEqual(analysis.max_total_marks, 50)
            for dim in analysis.dimensions.values():
                self.assertGreaterEqual(dim.score, 0)
                self.assertLessEqual(dim.score, 10)
            self.assertEqual(analysis.total_marks, sum(d.score for d in analysis.dimensions.values()))

    def test_suggestions_never_empty(self):
        for text in self.SAMPLES:
            self.assertTrue(analyze_essay(text).suggestions)

    def test_improvement_areas_sorted(self):
        for text in self.SAMPLES:
            ranks = [PRIORITY_RANK[a.priority] for a in analyze_essay(text).improvement_areas]
            self.assertEqual(ranks, sorted(ranks))

    def test_idempotent(self):
        for text in self.SAMPLES:
            self.assertEqual(analyze_essay(text).to_dict(), analyze_essay(text).to_dict())

    def test_word_count_monotonic_in_ascending_band(self):
        self.assertGreaterEqual(
            analyze_essay(make_essay(400)).word_count.score,
            analyze_essay(make_essay(200)).word_count.score,
        )

    def test_json_serializable(self):
        for text in self.SAMPLES:
            json.dumps(analyze_essay(text).to_dict())

    def test_non_string_input(self):
        analysis = analyze_essay(None)
        self.assertEqual(analysis.total_marks, 0)

    def test_records_are_immutable(self):
        analysis = analyze_essay(make_essay(120))
        with self.assertRaises(AttributeError):
            analysis.word_count = None


class TestAnalyzeBatch(unittest.TestCase):
    def test_batch_preserves_order(self):
        analyzer = EssayAnalyzer(AnalysisConfig(parallelism=2, show_progress=False))
        essays = [
            {'essay_id': f'e{i}', 'essay_text': make_essay(n)}
            for i, n in enumerate([10, 300, 0, 120, 800])
        ]
        df = analyzer.analyze_batch(essays)
        self.assertEqual(list(df['essay_id']), ['e0', 'e1', 'e2', 'e3', 'e4'])
        self.assertIn('total_marks', df.columns)
        self.assertEqual(df.loc[2, 'total_marks'], 0)
        self.assertEqual(df.loc[1, 'spellingAccuracy_score'], 10)

    def test_empty_batch(self):
        df = EssayAnalyzer(AnalysisConfig(show_progress=False)).analyze_batch([])
        self.assertTrue(df.empty)

    def test_spelling_errors_can_be_omitted(self):
        analyzer = EssayAnalyzer(AnalysisConfig(include_spelling_errors=False))
        analysis = analyzer.analyze(make_essay(60) + " Teh end arrived.")
        self.assertEqual(analysis.spelling_errors, ())
        self.assertLess(analysis.spelling_accuracy.score, 10)


if __name__ == '__main__':
    unittest.main()
