from __future__ import annotations
import logging
import re
from typing import List

from .datatypes import Document, Sentence
from .stopwords import STOPWORDS

logger = logging.getLogger(__name__)

# Private-use char; never matched by the boundary regex below
_PERIOD_MARKER = "\ue000"

# "Mr. Smith", "Jan. First": capitalized word, period, space, capital
RE_ABBREV   = re.compile(r"([A-Z][a-z]+)\.(\s[A-Z])")
RE_BOUNDARY = re.compile(r"(?<=[.!?])\s+(?=[A-Z\"“]|\Z)")
RE_NON_WORD = re.compile(r"[^\w\s-]", re.ASCII)  # ASCII letters only
RE_VOWEL    = re.compile(r"[aeiou]")
RE_PARAGRAPH_BREAK = re.compile(r"\n+")

# applied in order, case-insensitive
_CONTRACTIONS = [
    (re.compile(r"n't\b", re.I), " not"),
    (re.compile(r"'ll\b", re.I), " will"),
    (re.compile(r"'re\b", re.I), " are"),
    (re.compile(r"'ve\b", re.I), " have"),
    (re.compile(r"'m\b", re.I), " am"),
    (re.compile(r"'s\b", re.I), ""),
]

def split_sentences(text: str) -> List[str]:
    """
    Split text into sentences on . ! ? followed by whitespace and an uppercase
    letter, an opening quote or the end of the text.

    Periods after capitalized words that precede another capital ("Dr. Who")
    are masked first so they never end a sentence.
    """
    protected = RE_ABBREV.sub(r"\1" + _PERIOD_MARKER + r"\2", text)
    parts = RE_BOUNDARY.split(protected)
    parts = [p.replace(_PERIOD_MARKER, ".").strip() for p in parts]
    return [p for p in parts if p]

def stem_word(word: str) -> str:
    # Heuristic suffix stripper; first matching rule wins
    if "-" in word:
        return "-".join(stem_word(part) for part in word.split("-"))

    if len(word) <= 2:
        return word

    if word.endswith("ing") and len(word) > 5:
        stem = word[:-3]
        if RE_VOWEL.search(stem):
            return stem

    if word.endswith("ed") and len(word) > 4:
        stem = word[:-2]
        if RE_VOWEL.search(stem):
            return stem

    if word.endswith("ly") and len(word) > 4:
        return word[:-2]               # quickly -> quick
    if word.endswith("ies") and len(word) > 4:
        return word[:-3] + "y"         # stories -> story
    if word.endswith("es") and len(word) > 3:
        return word[:-2]               # boxes -> box
    if word.endswith("s") and not word.endswith("ss") and len(word) > 3:
        return word[:-1]               # books -> book
    return word

def tokenize_words(sentence: str, remove_stopwords: bool = True) -> List[str]:
    """
    Normalize a sentence into stemmed word tokens.

    Contractions are expanded, text is lowercased and stripped of punctuation
    (hyphens are kept), every token is stemmed, and stopwords are dropped
    afterwards when ``remove_stopwords`` is set.
    """
    expanded = sentence
    for pattern, replacement in _CONTRACTIONS:
        expanded = pattern.sub(replacement, expanded)

    cleaned = RE_NON_WORD.sub(" ", expanded.lower())
    words = [w.strip() for w in cleaned.split()]
    stemmed = [stem_word(w) for w in words if w]

    if remove_stopwords:
        return [w for w in stemmed if w not in STOPWORDS]
    return stemmed

def split_paragraphs(text: str) -> List[str]:
    parts = RE_PARAGRAPH_BREAK.split(text)
    return [p.strip() for p in parts if p.strip()]

def preprocess_text(text: str, favor_position_score: bool = False) -> Document:
    """Segment text into paragraphs and sentences with position metadata."""
    from .features import position_score

    paragraphs = split_paragraphs(text)
    sentences: List[Sentence] = []
    for p_idx, paragraph in enumerate(paragraphs):
        sents_raw = split_sentences(paragraph)
        for local_idx, s in enumerate(sents_raw):
            if favor_position_score:
                pos = position_score(local_idx, len(sents_raw), p_idx, len(paragraphs))
            else:
                pos = 0.5
            sentences.append(Sentence(
                index=len(sentences),
                text=s,
                paragraph=p_idx,
                length=len(tokenize_words(s, remove_stopwords=False)),
                position=pos,
            ))

    logger.debug("Segmented %d paragraphs into %d sentences", len(paragraphs), len(sentences))
    return Document(raw_text=text, paragraphs=paragraphs, sentences=sentences)
