from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

@dataclass
class Sentence:
    index: int        # global position in the document, 0-based
    text: str
    paragraph: int
    length: int       # word count, stopwords kept
    position: float   # position score in [0, 1]

@dataclass
class Document:
    raw_text: str
    paragraphs: List[str] = field(default_factory=list)
    sentences: List[Sentence] = field(default_factory=list)

@dataclass
class Edge:
    i: int
    j: int
    weight: float  # similarity

@dataclass
class Graph:
    nodes: List[Sentence]
    edges: List[Edge]  # undirected weighted edges

@dataclass
class SentenceScore:
    index: int
    tfidf: float
    textrank: float
    position: float
    length: float
    total: float
