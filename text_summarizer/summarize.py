from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional
from .datatypes import Document, Sentence
from .preprocessing import preprocess_text
from .features import compute_tfidf
from .graphing import calculate_similarity
from .scoring import score_sentences

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY_RATIO = 0.3
SIMILARITY_THRESHOLD = 0.6  # above this, two sentences are duplicates

@dataclass
class SummaryConfig:
    deduplicate_similar: bool = False    # drop near-duplicate sentences
    favor_position_score: bool = False   # favor intro/conclusion sentences
    similarity_threshold: float = SIMILARITY_THRESHOLD

def target_sentence_count(total: int, summary_ratio: float = DEFAULT_SUMMARY_RATIO,
                          max_sentences: Optional[int] = None) -> int:
    # max_sentences of 0 counts as unset
    if max_sentences:
        return min(max_sentences, total)
    return max(1, math.floor(total * summary_ratio))

def deduplicate_sentences(candidates: List[Sentence], threshold: float = SIMILARITY_THRESHOLD) -> List[Sentence]:
    """Keep candidates in order, skipping any too similar to one already kept."""
    kept: List[Sentence] = []
    for cand in candidates:
        if any(calculate_similarity(cand.text, s.text) > threshold for s in kept):
            logger.debug("Dropping near-duplicate sentence %d", cand.index)
            continue
        kept.append(cand)
    return kept

def select_sentences(doc: Document, scores: Dict[int, float], count: int,
                     deduplicate: bool = False, threshold: float = SIMILARITY_THRESHOLD) -> List[Sentence]:
    # stable sort: equal scores keep document order
    ranked = sorted(doc.sentences, key=lambda s: scores.get(s.index, 0.0), reverse=True)
    pool = ranked[:count * 2 if deduplicate else count]
    logger.debug("Selecting %d of %d sentences from a pool of %d", count, len(ranked), len(pool))

    if deduplicate:
        selected = deduplicate_sentences(pool, threshold=threshold)[:count]
    else:
        selected = pool
    return sorted(selected, key=lambda s: s.index)  # restore reading order

def generate_summary(selected: List[Sentence]) -> str:
    """
    Join selected sentences with a space inside a paragraph and a blank line
    between paragraphs. Paragraphs come out in the order they are first met
    while walking ``selected``.
    """
    by_paragraph: Dict[int, List[Sentence]] = {}
    for s in selected:
        by_paragraph.setdefault(s.paragraph, []).append(s)

    blocks = []
    for sents in by_paragraph.values():
        block = " ".join(s.text for s in sorted(sents, key=lambda s: s.index))
        if block:
            blocks.append(block)
    return "\n\n".join(blocks)

def summarize(text: str, summary_ratio: float = DEFAULT_SUMMARY_RATIO,
              max_sentences: Optional[int] = None, cfg: Optional[SummaryConfig] = None) -> str:
    """
    Extractive summary of ``text``.

    Keeps ``max_sentences`` sentences when given, otherwise
    ``floor(n * summary_ratio)`` (at least one). Text that segments into a
    single sentence is returned unchanged; empty or blank text gives "".
    """
    if not text:
        return ""
    cfg = cfg or SummaryConfig()

    # Pipeline glue
    doc = preprocess_text(text, favor_position_score=cfg.favor_position_score)
    if not doc.paragraphs:
        return ""
    if len(doc.sentences) <= 1:
        return text

    tfidf = compute_tfidf([s.text for s in doc.sentences])
    scores, _ = score_sentences(doc, tfidf)

    count = target_sentence_count(len(doc.sentences), summary_ratio, max_sentences)
    selected = select_sentences(doc, scores, count,
                                deduplicate=cfg.deduplicate_similar,
                                threshold=cfg.similarity_threshold)
    return generate_summary(selected)
