"""Streamlit UI for RedditPulse."""

import logging

import streamlit as st

from redditpulse.core.config import settings
from redditpulse.core.constants import FetchConstants, UIConstants
from redditpulse.core.models import AnalysisRequest, FetchFailure
from redditpulse.core.text import parse_entities
from redditpulse.services.pipeline import run_analysis
from redditpulse.services.reddit_client import RedditService
from redditpulse.services.sentiment import VADERSentimentAnalyzer
from redditpulse.ui.charts import (
    format_sentiment,
    leader_comparison_chart,
    sentiment_bar_chart,
    top_comments_markdown,
    word_frequency_chart,
)
from redditpulse.utils.data_prep import build_export_table, export_filename, to_csv_bytes

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

RESULT_KEY = "analysis_outcome"

# Page configuration
st.set_page_config(
    page_title="RedditPulse — Leader & Country Sentiment",
    page_icon="📊",
    layout="wide"
)


@st.cache_resource
def get_services():
    """Reddit client and scorer; they hold no per-request state."""
    return RedditService(), VADERSentimentAnalyzer()


reddit_service, scorer = get_services()

# Main UI
st.title("📊 RedditPulse — Leader & Country Sentiment")
st.write("Fetch comments from a subreddit and see how people feel about the leaders and countries you name.")

# Sidebar for search
with st.sidebar:
    st.header("🔎 Source")

    channel = st.text_input("Subreddit", value=settings.default_channel)
    sort = st.selectbox(
        "Sort threads by",
        FetchConstants.SORT_ORDERS,
        index=FetchConstants.SORT_ORDERS.index(settings.default_sort),
    )
    period = st.selectbox(
        "Time period",
        FetchConstants.PERIODS,
        index=FetchConstants.PERIODS.index(settings.default_period),
        help="Only applies to top and controversial listings",
    )
    max_threads = st.slider(
        "Number of threads",
        UIConstants.MIN_THREADS_UI,
        UIConstants.MAX_THREADS_UI,
        min(settings.default_max_threads, UIConstants.MAX_THREADS_UI),
    )

    st.header("🏷️ Entities")
    leaders_raw = st.text_input("Leaders (comma-separated)", value=UIConstants.DEFAULT_LEADERS)
    countries_raw = st.text_input("Countries (comma-separated)", value=UIConstants.DEFAULT_COUNTRIES)

    run_clicked = st.button("📊 Analyze", width='stretch')

if run_clicked:
    try:
        request = AnalysisRequest(
            channel=channel.strip(),
            leaders=parse_entities(leaders_raw),
            countries=parse_entities(countries_raw),
            sort=sort,
            period=period,
            max_threads=max_threads,
        )
    except ValueError as e:
        # A rejected request still replaces the previous outcome
        st.session_state.pop(RESULT_KEY, None)
        st.error(f"Invalid input: {e}")
    else:
        with st.spinner(f"Fetching and analyzing r/{request.channel}..."):
            outcome = run_analysis(request, reddit_service, scorer)
        # Replace the previous outcome as a whole
        st.session_state[RESULT_KEY] = outcome

outcome = st.session_state.get(RESULT_KEY)

if outcome is None:
    st.info("Choose a subreddit and some names in the sidebar, then press **Analyze**.")
elif isinstance(outcome, FetchFailure):
    st.warning(f"No data: {outcome.reason}")
else:
    st.subheader(outcome.summary)
    st.caption(UIConstants.SENTIMENT_LEGEND)

    col1, col2 = st.columns(2)

    with col1:
        fig, missing = sentiment_bar_chart(outcome.entity_results)
        if fig is not None:
            st.plotly_chart(fig, width='stretch')
        else:
            st.info("None of the entered names appear in the fetched comments.")
        if missing:
            st.caption("No mentions (N/A): " + ", ".join(missing))

    with col2:
        comparison = leader_comparison_chart(outcome.leader_results)
        if comparison is not None:
            st.plotly_chart(comparison, width='stretch')
        else:
            st.info(UIConstants.NOT_ENOUGH_LEADERS)

    col3, col4 = st.columns(2)

    with col3:
        words_fig = word_frequency_chart(outcome.word_frequencies)
        if words_fig is not None:
            st.plotly_chart(words_fig, width='stretch')
        else:
            st.info("No words left after filtering.")

    with col4:
        st.markdown(top_comments_markdown(outcome.top_comments))

    with st.expander("📋 Entity table"):
        for r in outcome.entity_results:
            st.write(f"**{r.entity}** ({r.kind}): {format_sentiment(r.average_sentiment)} from {r.mentions} mentions")

    table = build_export_table(outcome.entity_results)
    st.download_button(
        "💾 Download entity sentiment (CSV)",
        data=to_csv_bytes(table),
        file_name=export_filename(),
        mime="text/csv",
    )
