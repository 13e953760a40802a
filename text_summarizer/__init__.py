from .datatypes import Sentence, Document, Edge, Graph, SentenceScore
from .stopwords import STOPWORDS
from .preprocessing import split_sentences, tokenize_words, stem_word, split_paragraphs, preprocess_text
from .features import position_score, length_score, compute_tfidf, average_tfidf
from .graphing import calculate_similarity, build_similarity_matrix, build_graph, to_networkx
from .scoring import rank_sentences, score_sentences
from .summarize import (SummaryConfig, target_sentence_count, deduplicate_sentences,
                        select_sentences, generate_summary, summarize)
from .loaders import extract_markdown_text, extract_rtf_text, load_text
