"""Tests for text_summarizer/features.py."""

from __future__ import annotations

import math
import unittest

from text_summarizer.features import average_tfidf, compute_tfidf, length_score, position_score


class TestPositionScore(unittest.TestCase):

    def test_first_sentence_of_first_paragraph_clamped(self):
        self.assertEqual(position_score(0, 3, 0, 2), 1.0)

    def test_single_sentence_paragraph(self):
        self.assertAlmostEqual(position_score(0, 1, 1, 3), 1.0)

    def test_interior_sentence_middle_paragraph(self):
        self.assertAlmostEqual(position_score(1, 3, 1, 3), 0.5 - 0.4 / 3)

    def test_last_paragraph_boost(self):
        self.assertAlmostEqual(position_score(1, 4, 2, 3), 0.44)
        self.assertAlmostEqual(position_score(3, 4, 2, 3), 0.88)

    def test_single_paragraph_gets_first_boost_only(self):
        self.assertAlmostEqual(position_score(2, 3, 0, 1), 0.96)

    def test_interior_scores_decrease(self):
        scores = [position_score(i, 6, 1, 3) for i in range(1, 5)]
        self.assertEqual(scores, sorted(scores, reverse=True))


class TestLengthScore(unittest.TestCase):

    def test_soft_cap(self):
        self.assertEqual(length_score(0), 0.0)
        self.assertEqual(length_score(5), 0.5)
        self.assertEqual(length_score(10), 1.0)
        self.assertEqual(length_score(25), 1.0)


class TestComputeTfidf(unittest.TestCase):

    def test_global_tf_times_log_idf(self):
        table = compute_tfidf(["Cats chase mice.", "Dogs chase cats.", "Birds sing."])
        self.assertEqual(set(table), {"cat", "chase", "mice", "dog", "bird", "sing"})
        self.assertAlmostEqual(table["cat"], 2 * math.log(3 / 2))
        self.assertAlmostEqual(table["chase"], 2 * math.log(3 / 2))
        self.assertAlmostEqual(table["mice"], math.log(3))

    def test_term_in_every_sentence_weighs_zero(self):
        table = compute_tfidf(["Rivers flow.", "Rivers freeze."])
        self.assertEqual(table["river"], 0.0)

    def test_stopwords_excluded(self):
        table = compute_tfidf(["The river is wide.", "A road is long."])
        self.assertNotIn("the", table)
        self.assertNotIn("is", table)

    def test_empty(self):
        self.assertEqual(compute_tfidf([]), {})


class TestAverageTfidf(unittest.TestCase):

    def test_missing_tokens_count_as_zero(self):
        self.assertEqual(average_tfidf(["a", "b"], {"a": 1.0}), 0.5)

    def test_no_tokens(self):
        self.assertEqual(average_tfidf([], {"a": 1.0}), 0.0)


if __name__ == "__main__":
    unittest.main()
