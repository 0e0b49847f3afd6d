"""
FAQ Assistant - Streamlit front end
File: faq_app.py

Instructions:
1. Place the FAQ file at 'faq.txt' (Q:/A: blocks) or point FAQ_CORPUS_PATH at it (.txt or .csv)
2. Install: pip install -e .
3. Run: streamlit run faq_app.py
"""

import asyncio
import logging
import os

import pandas as pd
import streamlit as st

from faq_corpus import CorpusLoadError
from faq_matcher import FAQMatcher, MatcherConfig, QueryResult

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
logger = logging.getLogger(__name__)

# --------------------------- Config ---------------------------------
CORPUS_PATH = os.getenv("FAQ_CORPUS_PATH", "faq.txt")


@st.cache_resource
def get_matcher(corpus_path: str) -> FAQMatcher:
    """One matcher per process, so the failure counter outlives reruns."""
    return FAQMatcher.from_file(corpus_path, config=MatcherConfig.from_env())


# --------------------------- Streamlit UI ----------------------------

def _show_pipeline(matcher: FAQMatcher, result: QueryResult):
    trace = result.trace
    if trace is None or trace.snapshot is None:
        return

    snapshot = trace.snapshot
    st.subheader("Matching Pipeline")
    col1, col2, col3 = st.columns(3)
    with col1:
        st.markdown("**1. Normalization**")
        st.code(trace.normalized_query or "(empty)", language="text")
    with col2:
        st.markdown("**2. Query Expansion**")
        st.code(trace.expanded_query or "(no synonyms)", language="text")
    with col3:
        st.markdown("**3. Decision**")
        st.metric("Outcome", result.outcome.value)
        st.metric("Consecutive Failures", matcher.failure_count)

    if trace.relevance:
        rows = [
            {"Question": snapshot.entries[i].question, "TF-IDF Score": round(score, 4)}
            for i, score in trace.relevance
        ]
        st.markdown("**Relevance scores (top k)**")
        st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)

        top_idx = trace.relevance[0][0]
        terms = snapshot.relevance.explain(trace.scoring_query, top_idx, top_k_terms=5)
        if terms:
            st.markdown("**Why the top question matched (TF-IDF overlap):**")
            term_df = pd.DataFrame(terms, columns=["Matching Term", "Relevance Score"])
            st.dataframe(term_df, hide_index=True, use_container_width=True)

    if trace.fuzzy:
        rows = [
            {"Question": snapshot.entries[i].question, "Fuzzy Distance": round(distance, 4)}
            for i, distance in trace.fuzzy
        ]
        st.markdown("**Fuzzy fallback candidates**")
        st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)


def run_streamlit_app(matcher: FAQMatcher):
    """Ask box, answer, suggestions and corpus controls."""
    st.title("FAQ Assistant")

    with st.sidebar:
        st.header("Corpus")
        if st.button("Reload FAQ", key="reload", use_container_width=True):
            try:
                count = matcher.reload()
            except CorpusLoadError as exc:
                logger.error("FAQ reload failed: %s", exc)
                st.error(f"Reload failed, keeping the current FAQ: {exc.reason}")
            else:
                st.success(f"FAQ reloaded ({count} entries)")

        stats = matcher.snapshot.relevance.stats()
        st.metric("FAQ Entries", stats["num_documents"])
        st.metric("Vocabulary Size", stats["vocabulary_size"])
        st.metric("Avg Question Length", f"{stats['avg_doc_length']:.1f} terms")

        st.markdown("---")
        show_pipeline = st.checkbox("Show matching details", value=False)

    question = st.text_input(
        "Ask a question",
        placeholder="Try: 'how do I reset my password?'",
    )
    ask_btn = st.button("Ask", key="ask", type="primary")

    if not (ask_btn and question):
        return

    result = asyncio.run(matcher.ask(question))

    st.markdown("---")
    if result.answer:
        st.markdown("**Answer:**")
        st.write(result.answer)
    else:
        st.warning("I couldn't find a confident answer. Did you mean one of these?")

    if result.suggestions:
        st.markdown("**Related questions:**")
        for suggestion in result.suggestions:
            st.write(f"- {suggestion}")

    if show_pipeline:
        st.markdown("---")
        _show_pipeline(matcher, result)


# --------------------------- Main ------------------------------------

def main():
    """Main entry point."""
    st.set_page_config(page_title="FAQ Assistant", layout="wide")
    try:
        matcher = get_matcher(CORPUS_PATH)
    except CorpusLoadError as exc:
        logger.error("Startup failed: %s", exc)
        st.error(str(exc))
        st.stop()
    run_streamlit_app(matcher)


if __name__ == "__main__":
    main()
