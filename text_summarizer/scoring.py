from __future__ import annotations
import logging
from typing import Dict, List, Tuple
import numpy as np
from .datatypes import Document, SentenceScore
from .features import average_tfidf, length_score
from .graphing import build_similarity_matrix
from .preprocessing import tokenize_words

logger = logging.getLogger(__name__)

DAMPING = 0.85
MAX_ITERATIONS = 50
CONVERGENCE_THRESHOLD = 0.0001

TFIDF_WEIGHT = 0.4
TEXTRANK_WEIGHT = 0.3
POSITION_WEIGHT = 0.2
LENGTH_WEIGHT = 0.1

def rank_sentences(sentences: List[str],
                   damping: float = DAMPING,
                   max_iter: int = MAX_ITERATIONS,
                   tolerance: float = CONVERGENCE_THRESHOLD) -> List[float]:
    """
    TextRank scores for sentences, in input order.

    PageRank over the sentence-similarity graph:
        TR(Si) = (1-d)/N + d * sum_{j != i} M[j][i] * TR(Sj)
    where M is the row-normalized similarity matrix. A sentence sharing no
    tokens with any other gets a uniform row (1/N) instead of a zero row.

    Iteration stops when the Euclidean distance between successive score
    vectors drops below ``tolerance``, or after ``max_iter`` rounds; the last
    iterate is returned either way.
    """
    n = len(sentences)
    if n == 0:
        return []
    if n == 1:
        return [1.0]

    simM = np.array(build_similarity_matrix(sentences), dtype=float)
    row_sums = simM.sum(axis=1, keepdims=True)
    isolated = (row_sums == 0).ravel()
    M = np.divide(simM, row_sums, out=np.zeros_like(simM), where=row_sums != 0)
    M[isolated] = 1.0 / n
    # self-links never contribute
    np.fill_diagonal(M, 0.0)

    scores = np.full(n, 1.0 / n)
    for iteration in range(max_iter):
        new_scores = damping * M.T.dot(scores) + (1.0 - damping) / n
        diff = np.linalg.norm(scores - new_scores)
        scores = new_scores
        if diff < tolerance:
            logger.debug("TextRank converged after %d rounds", iteration + 1)
            break
    else:
        logger.debug("TextRank stopped at the %d round cap without converging", max_iter)

    return scores.tolist()

def score_sentences(doc: Document, tfidf: Dict[str, float]) -> Tuple[Dict[int, float], List[SentenceScore]]:
    """
    Blend four signals into one score per sentence:
        0.4 * mean TF-IDF + 0.3 * TextRank + 0.2 * position + 0.1 * length
    Returns the score map keyed by sentence index and the per-signal breakdown.
    """
    textrank = rank_sentences([s.text for s in doc.sentences])

    scores: Dict[int, float] = {}
    breakdown: List[SentenceScore] = []
    for i, s in enumerate(doc.sentences):
        tfidf_score = average_tfidf(tokenize_words(s.text), tfidf)
        len_score = length_score(s.length)
        total = (TFIDF_WEIGHT * tfidf_score
                 + TEXTRANK_WEIGHT * textrank[i]
                 + POSITION_WEIGHT * s.position
                 + LENGTH_WEIGHT * len_score)
        scores[s.index] = total
        breakdown.append(SentenceScore(
            index=s.index,
            tfidf=tfidf_score,
            textrank=textrank[i],
            position=s.position,
            length=len_score,
            total=total,
        ))
    return scores, breakdown
