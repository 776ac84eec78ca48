"""Tests for the presentation helpers."""

import plotly.graph_objects as go

from redditpulse.core.constants import UIConstants
from redditpulse.core.models import RawComment, SentimentResult, TopComments, WordFrequency
from redditpulse.ui.charts import (
    format_sentiment,
    leader_comparison_chart,
    sentiment_bar_chart,
    top_comments_markdown,
    word_frequency_chart,
)


def _leader(name, avg, mentions=1):
    return SentimentResult(name, avg, mentions=mentions, kind="leader")


def test_format_sentiment():
    assert format_sentiment(None) == "N/A"
    assert format_sentiment(0.3) == "+0.30"
    assert format_sentiment(-0.126) == "-0.13"


def test_comparison_with_two_leaders():
    fig = leader_comparison_chart([_leader("Trump", 0.2, 10), _leader("Kamala", -0.1, 4)])
    assert isinstance(fig, go.Figure)
    assert tuple(fig.data[0].x) == ("Trump", "Kamala")
    assert tuple(fig.data[1].y) == (10, 4)


def test_comparison_uses_first_two_leaders():
    fig = leader_comparison_chart([_leader("A", 0.1), _leader("B", 0.2), _leader("C", 0.3)])
    assert tuple(fig.data[0].x) == ("A", "B")


def test_comparison_placeholder_with_one_leader():
    assert leader_comparison_chart([_leader("Trump", 0.2)]) is None
    assert leader_comparison_chart([]) is None
    assert UIConstants.NOT_ENOUGH_LEADERS


def test_comparison_with_absent_leader():
    fig = leader_comparison_chart([_leader("Trump", 0.2), _leader("Nobody", None, 0)])
    assert isinstance(fig, go.Figure)


def test_sentiment_bar_chart_ranks_and_lists_missing():
    results = [_leader("A", -0.2), _leader("B", None, 0), _leader("C", 0.6)]
    fig, missing = sentiment_bar_chart(results)
    assert missing == ["B"]
    # lowest first because plotly draws bottom-up
    assert tuple(fig.data[0].y) == ("A", "C")


def test_sentiment_bar_chart_all_missing():
    fig, missing = sentiment_bar_chart([_leader("B", None, 0)])
    assert fig is None
    assert missing == ["B"]


def test_word_frequency_chart():
    assert word_frequency_chart([]) is None
    fig = word_frequency_chart([WordFrequency("war", 5), WordFrequency("peace", 2)])
    assert tuple(fig.data[0].y) == ("peace", "war")


def test_top_comments_markdown():
    top = TopComments(
        positive=[RawComment(text="Great news")],
        negative=[RawComment(text="Awful\nnews")],
        positive_scores=[0.6],
        negative_scores=[-0.7],
    )
    text = top_comments_markdown(top)
    assert "1. (+0.60) Great news" in text
    assert "1. (-0.70) Awful news" in text
    assert "_None_" in top_comments_markdown(TopComments())
