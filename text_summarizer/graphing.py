from __future__ import annotations
import math
from typing import List, Set
import networkx as nx
from .datatypes import Sentence, Graph, Edge
from .preprocessing import tokenize_words

def _cosine_sets(words1: Set[str], words2: Set[str]) -> float:
    # cosine over binary term-presence vectors
    if not words1 or not words2:
        return 0.0
    common = words1 & words2
    return len(common) / (math.sqrt(len(words1)) * math.sqrt(len(words2)))

def calculate_similarity(sentence1: str, sentence2: str) -> float:
    """Similarity in [0, 1] between two sentences, stopwords removed."""
    return _cosine_sets(set(tokenize_words(sentence1)), set(tokenize_words(sentence2)))

def build_similarity_matrix(sentences: List[str]) -> List[List[float]]:
    n = len(sentences)
    # tokenize once; each cell still uses the symmetric set formula
    word_sets = [set(tokenize_words(s)) for s in sentences]
    M = [[0.0]*n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            if i != j:
                M[i][j] = _cosine_sets(word_sets[i], word_sets[j])
    return M

def build_graph(sentences: List[Sentence], simM: List[List[float]], threshold: float = 0.1) -> Graph:
    edges: List[Edge] = []
    n = len(sentences)
    for i in range(n):
        for j in range(i+1, n):
            w = simM[i][j]
            if w >= threshold:
                edges.append(Edge(i=i, j=j, weight=w))
    return Graph(nodes=sentences, edges=edges)

def to_networkx(graph: Graph) -> nx.Graph:
    G = nx.Graph()
    for s in graph.nodes:
        G.add_node(s.index, paragraph=s.paragraph, text=s.text)
    for e in graph.edges:
        G.add_edge(graph.nodes[e.i].index, graph.nodes[e.j].index, weight=e.weight)
    return G
