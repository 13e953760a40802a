"""Tests for text_summarizer/graphing.py."""

from __future__ import annotations

import unittest

from text_summarizer.graphing import build_graph, build_similarity_matrix, calculate_similarity, to_networkx
from text_summarizer.preprocessing import preprocess_text


class TestCalculateSimilarity(unittest.TestCase):

    def test_identical_sentence_is_one(self):
        self.assertAlmostEqual(calculate_similarity("Cats chase mice.", "Cats chase mice."), 1.0)

    def test_partial_overlap(self):
        # {cat, chase, mice} vs {dog, chase, cat}
        self.assertAlmostEqual(calculate_similarity("Cats chase mice.", "Dogs chase cats."), 2 / 3)

    def test_duplicate_tokens_collapse(self):
        self.assertAlmostEqual(calculate_similarity("Cats cats cats.", "Cats."), 1.0)

    def test_symmetric(self):
        a = "Solar power grows quickly in sunny regions."
        b = "Sunny regions adopt solar panels."
        self.assertEqual(calculate_similarity(a, b), calculate_similarity(b, a))

    def test_stopword_only_sentence_is_zero(self):
        self.assertEqual(calculate_similarity("It is what it is.", "It is what it is."), 0.0)
        self.assertEqual(calculate_similarity("", "Cats chase mice."), 0.0)

    def test_no_shared_tokens(self):
        self.assertEqual(calculate_similarity("Cats chase mice.", "Birds sing."), 0.0)


class TestSimilarityMatrix(unittest.TestCase):

    SENTENCES = ["Cats chase mice.", "Dogs chase cats.", "Birds sing.", "Cats chase mice."]

    def test_shape_and_diagonal(self):
        M = build_similarity_matrix(self.SENTENCES)
        self.assertEqual(len(M), 4)
        self.assertTrue(all(len(row) == 4 for row in M))
        self.assertTrue(all(M[i][i] == 0.0 for i in range(4)))

    def test_symmetric_and_bounded(self):
        M = build_similarity_matrix(self.SENTENCES)
        for i in range(4):
            for j in range(4):
                self.assertEqual(M[i][j], M[j][i])
                self.assertGreaterEqual(M[i][j], 0.0)
                self.assertLessEqual(M[i][j], 1.0)

    def test_matches_pairwise_similarity(self):
        M = build_similarity_matrix(self.SENTENCES)
        self.assertAlmostEqual(M[0][1], calculate_similarity(self.SENTENCES[0], self.SENTENCES[1]))
        self.assertAlmostEqual(M[0][3], 1.0)

    def test_empty(self):
        self.assertEqual(build_similarity_matrix([]), [])


class TestBuildGraph(unittest.TestCase):

    def test_edges_above_threshold(self):
        doc = preprocess_text("Cats chase mice. Dogs chase cats. Birds sing.")
        M = build_similarity_matrix([s.text for s in doc.sentences])
        graph = build_graph(doc.sentences, M, threshold=0.5)
        self.assertEqual([(e.i, e.j) for e in graph.edges], [(0, 1)])

        G = to_networkx(graph)
        self.assertEqual(G.number_of_nodes(), 3)
        self.assertEqual(G.number_of_edges(), 1)
        self.assertAlmostEqual(G[0][1]["weight"], 2 / 3)


if __name__ == "__main__":
    unittest.main()
