"""Plotly figures and text blocks for the results page."""

from typing import List, Optional, Tuple

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from ..core.constants import AnalysisConstants, UIConstants
from ..core.models import SentimentResult, TopComments, WordFrequency

POSITIVE_COLOR = "#1E8449"
NEGATIVE_COLOR = "#C0392B"
NEUTRAL_COLOR = "#707B7C"


def format_sentiment(value: Optional[float]) -> str:
    if value is None:
        return AnalysisConstants.MISSING_LABEL
    return f"{value:+.2f}"


def _bar_color(value: Optional[float]) -> str:
    if value is None or value == 0:
        return NEUTRAL_COLOR
    return POSITIVE_COLOR if value > 0 else NEGATIVE_COLOR


def sentiment_bar_chart(
    results: List[SentimentResult], title: str = "Average sentiment by entity"
) -> Tuple[Optional[go.Figure], List[str]]:
    """Horizontal bars ranked by average sentiment, best on top.

    Entities nobody mentioned are not drawn; their names come back as the
    second element so the caller can list them as N/A. The figure is None
    when no entity has a score.
    """
    present = [r for r in results if not r.is_missing]
    missing = [r.entity for r in results if r.is_missing]
    if not present:
        return None, missing

    # Plotly draws the first y category at the bottom
    ranked = sorted(present, key=lambda r: r.average_sentiment)
    fig = go.Figure(go.Bar(
        x=[r.average_sentiment for r in ranked],
        y=[r.entity for r in ranked],
        orientation="h",
        marker_color=[_bar_color(r.average_sentiment) for r in ranked],
        text=[format_sentiment(r.average_sentiment) for r in ranked],
        textposition="outside",
        customdata=[r.mentions for r in ranked],
        hovertemplate="%{y}: %{x:.3f} (%{customdata} mentions)<extra></extra>",
    ))
    fig.update_layout(title=title, xaxis=dict(range=[-1, 1], title="Average sentiment"), height=120 + 40 * len(ranked))
    return fig, missing


def leader_comparison_chart(leader_results: List[SentimentResult]) -> Optional[go.Figure]:
    """Side-by-side view of the first two leaders, or None with fewer than two."""
    if len(leader_results) < 2:
        return None
    first, second = leader_results[0], leader_results[1]
    names = [first.entity, second.entity]

    fig = make_subplots(rows=1, cols=2, subplot_titles=("Average sentiment", "Mentions"))
    fig.add_trace(go.Bar(
        x=names,
        y=[first.average_sentiment, second.average_sentiment],
        marker_color=[_bar_color(first.average_sentiment), _bar_color(second.average_sentiment)],
        text=[format_sentiment(first.average_sentiment), format_sentiment(second.average_sentiment)],
        textposition="outside",
        showlegend=False,
    ), row=1, col=1)
    fig.add_trace(go.Bar(
        x=names,
        y=[first.mentions, second.mentions],
        marker_color=NEUTRAL_COLOR,
        text=[first.mentions, second.mentions],
        textposition="outside",
        showlegend=False,
    ), row=1, col=2)
    fig.update_yaxes(range=[-1, 1], row=1, col=1)
    fig.update_layout(title=f"{first.entity} vs {second.entity}")
    return fig


def word_frequency_chart(words: List[WordFrequency]) -> Optional[go.Figure]:
    if not words:
        return None
    ordered = list(reversed(words))
    fig = go.Figure(go.Bar(
        x=[w.count for w in ordered],
        y=[w.word for w in ordered],
        orientation="h",
        marker_color=NEUTRAL_COLOR,
    ))
    fig.update_layout(title=f"Top {len(words)} words", xaxis_title="Occurrences", height=120 + 30 * len(words))
    return fig


def _excerpt(s, n=UIConstants.MAX_COMMENT_PREVIEW):
    s = (s or "").strip().replace("\n", " ")
    return s if len(s) <= n else s[:n-1] + "…"


def top_comments_markdown(top: TopComments) -> str:
    """Markdown block listing the most positive and most negative comments."""
    lines = ["**Most positive comments**", ""]
    if top.positive:
        lines += [f"{i}. ({format_sentiment(s)}) {_excerpt(c.text)}"
                  for i, (c, s) in enumerate(zip(top.positive, top.positive_scores), 1)]
    else:
        lines.append("_None_")
    lines += ["", "**Most negative comments**", ""]
    if top.negative:
        lines += [f"{i}. ({format_sentiment(s)}) {_excerpt(c.text)}"
                  for i, (c, s) in enumerate(zip(top.negative, top.negative_scores), 1)]
    else:
        lines.append("_None_")
    return "\n".join(lines)
