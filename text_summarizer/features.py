from __future__ import annotations
from typing import Dict, List
from collections import Counter
import math
from .preprocessing import tokenize_words

FIRST_PARAGRAPH_BOOST = 1.2
LAST_PARAGRAPH_BOOST = 1.1

def position_score(local_idx: int, paragraph_sentence_count: int,
                   paragraph_idx: int, paragraph_count: int) -> float:
    """
    Favor the opening and closing sentences of each paragraph, and sentences
    in the first and last paragraph of the document.

    Within a paragraph: first (or only) sentence 1.0, last sentence 0.8,
    interior sentences 0.5 - 0.4 * (local_idx / count).
    The first paragraph is boosted x1.2, otherwise the last one x1.1; a
    single-paragraph document only gets the first-paragraph boost.
    Result is clamped to [0, 1].
    """
    if paragraph_sentence_count <= 1 or local_idx == 0:
        score = 1.0
    elif local_idx == paragraph_sentence_count - 1:
        score = 0.8
    else:
        score = 0.5 - 0.4 * (local_idx / paragraph_sentence_count)

    if paragraph_idx == 0:
        score *= FIRST_PARAGRAPH_BOOST
    elif paragraph_idx == paragraph_count - 1:
        score *= LAST_PARAGRAPH_BOOST

    return max(0.0, min(1.0, score))

def length_score(word_count: int) -> float:
    return min(1.0, word_count / 10)

def compute_tfidf(sentences: List[str]) -> Dict[str, float]:
    """
    TF-IDF with each sentence treated as one 'document':
      - TF: total count of the term across all sentences
      - IDF: log(N / DF), DF = number of sentences containing the term
    """
    tf = Counter()
    df = Counter()
    for s in sentences:
        tokens = tokenize_words(s)
        tf.update(tokens)
        df.update(set(tokens))

    N = len(sentences)
    return {t: c * math.log(N / df[t]) for t, c in tf.items()}

def average_tfidf(tokens: List[str], tfidf: Dict[str, float]) -> float:
    total = sum(tfidf.get(t, 0.0) for t in tokens)
    return total / max(1, len(tokens))
