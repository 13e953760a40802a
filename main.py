from __future__ import annotations
import streamlit as st
import pandas as pd
import numpy as np
import matplotlib.pyplot as plt
import networkx as nx
import io

from text_summarizer.summarize import (summarize, SummaryConfig, target_sentence_count,
                                       select_sentences, generate_summary)
from text_summarizer.preprocessing import preprocess_text, tokenize_words
from text_summarizer.features import compute_tfidf
from text_summarizer.graphing import build_similarity_matrix, build_graph, to_networkx
from text_summarizer.scoring import score_sentences
from text_summarizer.loaders import load_text, SUPPORTED_EXTENSIONS

def _preview(text: str, limit: int = 80) -> str:
    return text[:limit] + "..." if len(text) > limit else text

def draw_graph_visualization(graph, selected_indices, edge_threshold):
    """Draw the similarity graph; selected sentences are highlighted."""
    G = to_networkx(graph)

    fig, ax = plt.subplots(figsize=(10, 8))
    ax.set_title(f"Sentence Similarity Graph (edges >= {edge_threshold})", fontsize=14, fontweight='bold')

    if len(G.nodes) > 0:
        pos = nx.spring_layout(G, k=2, iterations=50, seed=42)

        colors = ['gold' if n in selected_indices else 'lightblue' for n in G.nodes()]
        nx.draw_networkx_nodes(G, pos, ax=ax, node_color=colors, node_size=800, alpha=0.8)

        edges = G.edges(data=True)
        if edges:
            weights = [d['weight'] for _, _, d in edges]
            max_weight = max(weights)
            nx.draw_networkx_edges(G, pos, ax=ax,
                                   width=[3 * (w / max_weight) for w in weights],
                                   alpha=0.6, edge_color='gray')

        labels = {n: f"S{n+1}" for n in G.nodes()}
        nx.draw_networkx_labels(G, pos, labels, ax=ax, font_size=10, font_weight='bold')

        if len(G.nodes) <= 10:
            edge_labels = {(u, v): f"{d['weight']:.2f}" for u, v, d in G.edges(data=True)}
            nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax, font_size=8)

    ax.set_aspect('equal')
    ax.axis('off')
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf

def create_sidebar_controls():
    st.sidebar.header("Parameters")
    ratio = st.sidebar.slider("Summary ratio", min_value=0.1, max_value=1.0, value=0.3, step=0.05,
                              help="Fraction of sentences to keep when no maximum is set")
    max_sentences = st.sidebar.number_input("Maximum sentences (0 = use ratio)", min_value=0, value=0, step=1)
    dedup = st.sidebar.checkbox("Remove similar sentences", value=False)
    favor_position = st.sidebar.checkbox("Favor intro/conclusion sentences", value=False)

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=True, help="Show detailed pipeline steps")
    edge_threshold = st.sidebar.slider("Graph edge threshold", min_value=0.05, max_value=1.0, value=0.1, step=0.05,
                                       help="Only affects the graph drawing, not the ranking")

    cfg = SummaryConfig(deduplicate_similar=dedup, favor_position_score=favor_position)
    return ratio, int(max_sentences) or None, cfg, debug_mode, edge_threshold

def debug_pipeline(text: str, ratio: float, max_sentences, cfg: SummaryConfig, edge_threshold: float) -> str:
    """Run the pipeline step by step and show every intermediate table."""

    st.header("Step 1: Segmentation")
    doc = preprocess_text(text, favor_position_score=cfg.favor_position_score)
    if len(doc.sentences) <= 1:
        st.info("One sentence or less: the text is returned as is.")
        return summarize(text, ratio, max_sentences, cfg)

    with st.expander("Sentences", expanded=True):
        col1, col2, col3 = st.columns(3)
        col1.metric("Paragraphs", len(doc.paragraphs))
        col2.metric("Sentences", len(doc.sentences))
        col3.metric("Words", sum(s.length for s in doc.sentences))
        st.dataframe(pd.DataFrame([{
            "Sentence #": s.index + 1,
            "Paragraph": s.paragraph + 1,
            "Words": s.length,
            "Position Score": round(s.position, 3),
            "Tokens": ", ".join(tokenize_words(s.text)),
            "Text": _preview(s.text),
        } for s in doc.sentences]), use_container_width=True)

    st.header("Step 2: TF-IDF")
    texts = [s.text for s in doc.sentences]
    tfidf = compute_tfidf(texts)
    with st.expander("Term weights", expanded=False):
        st.metric("Unique Terms", len(tfidf))
        st.dataframe(pd.DataFrame(sorted(tfidf.items(), key=lambda x: x[1], reverse=True),
                                  columns=["Term", "TF-IDF"]), use_container_width=True, height=250)

    st.header("Step 3: Similarity Graph")
    simM = build_similarity_matrix(texts)
    with st.expander("Similarity matrix", expanded=False):
        n = len(simM)
        if n <= 50:
            names = [f"S{i+1}" for i in range(n)]
            st.dataframe(pd.DataFrame(simM, columns=names, index=names), use_container_width=True)
        else:
            flat = [simM[i][j] for i in range(n) for j in range(i+1, n)]
            col1, col2, col3 = st.columns(3)
            col1.metric("Max Similarity", f"{max(flat):.3f}")
            col2.metric("Mean Similarity", f"{np.mean(flat):.3f}")
            col3.metric("Std Similarity", f"{np.std(flat):.3f}")

    st.header("Step 4: Scoring")
    scores, breakdown = score_sentences(doc, tfidf)
    with st.expander("Score breakdown", expanded=True):
        st.write("**Final = 0.4 x TF-IDF + 0.3 x TextRank + 0.2 x Position + 0.1 x Length**")
        st.dataframe(pd.DataFrame([{
            "Sentence #": b.index + 1,
            "TF-IDF": round(b.tfidf, 4),
            "TextRank": round(b.textrank, 4),
            "Position": round(b.position, 3),
            "Length": round(b.length, 3),
            "Final Score": round(b.total, 4),
        } for b in breakdown]), use_container_width=True)

    st.header("Step 5: Selection")
    count = target_sentence_count(len(doc.sentences), ratio, max_sentences)
    selected = select_sentences(doc, scores, count, deduplicate=cfg.deduplicate_similar,
                                threshold=cfg.similarity_threshold)
    chosen = {s.index for s in selected}
    with st.expander("Selected sentences", expanded=True):
        col1, col2 = st.columns(2)
        col1.metric("Target Sentences", count)
        col2.metric("Actually Selected", len(selected))
        st.dataframe(pd.DataFrame([{
            "Sentence #": s.index + 1,
            "Score": round(scores[s.index], 4),
            "Selected": "yes" if s.index in chosen else "no",
            "Text": s.text,
        } for s in doc.sentences]), use_container_width=True)

        if len(doc.sentences) <= 50:
            try:
                graph = build_graph(doc.sentences, simM, threshold=edge_threshold)
                st.image(draw_graph_visualization(graph, chosen, edge_threshold),
                         caption="Selected sentences in gold")
            except Exception as e:
                st.error(f"Could not generate graph visualization: {str(e)}")

    return generate_summary(selected)

def main():
    st.title("TextRank + TF-IDF Summarizer")
    st.write("Upload a text file or paste text to get an extractive summary")

    ratio, max_sentences, cfg, debug_mode, edge_threshold = create_sidebar_controls()

    uploaded_file = st.file_uploader("Choose a text file", type=list(SUPPORTED_EXTENSIONS))
    if uploaded_file is not None:
        try:
            text = load_text(uploaded_file.name, uploaded_file.read())
        except (ValueError, UnicodeDecodeError) as e:
            st.error(f"Could not read file: {str(e)}")
            return
        st.text_area("Content", text, height=200, disabled=True)
    else:
        text = st.text_area("Text", height=200)

    if st.button("Generate Summary", type="primary") and text:
        try:
            if debug_mode:
                st.markdown("---")
                result = debug_pipeline(text, ratio, max_sentences, cfg, edge_threshold)
            else:
                with st.spinner("Generating summary..."):
                    result = summarize(text, ratio, max_sentences, cfg)

            st.markdown("---")
            st.header("Final Summary")
            st.text_area("Generated Summary", result, height=150, disabled=True)

            col1, col2, col3 = st.columns(3)
            col1.metric("Original Length", len(text.split()))
            col2.metric("Summary Length", len(result.split()))
            compression = len(result.split()) / len(text.split()) if text.split() else 0
            col3.metric("Actual Compression", f"{compression:.2%}")
        except Exception as e:
            st.error(f"Error generating summary: {str(e)}")
            st.exception(e)

if __name__ == "__main__":
    main()
