"""Fetch, clean, score and aggregate one analysis request."""

import logging
from typing import Optional, Union

from ..core.config import settings
from ..core.models import AnalysisRequest, AnalysisResult, FetchFailure
from ..core.scoring import aggregate_entities, top_extremes
from ..core.text import normalize_comments, top_words

logger = logging.getLogger(__name__)


def run_analysis(
    request: AnalysisRequest,
    fetcher,
    scorer,
    top_words_n: Optional[int] = None,
    top_comments_k: Optional[int] = None,
) -> Union[AnalysisResult, FetchFailure]:
    """Run the whole pipeline for ``request``.

    ``fetcher`` needs ``fetch_comments(channel, period, sort, max_threads)``;
    ``scorer`` needs ``score_many(texts)`` and sees each comment once. Nothing past
    the fetch runs when it fails or comes back empty. The result is built
    in one go and holds no reference to earlier requests.
    """
    n = settings.top_words_n if top_words_n is None else top_words_n
    k = settings.top_comments_k if top_comments_k is None else top_comments_k

    fetched = fetcher.fetch_comments(request.channel, request.period, request.sort, request.max_threads)
    if isinstance(fetched, FetchFailure):
        logger.warning(f"Analysis halted: {fetched.reason}")
        return fetched
    if not fetched:
        failure = FetchFailure(f"No comments found in r/{request.channel}")
        logger.warning(f"Analysis halted: {failure.reason}")
        return failure

    comments = normalize_comments(fetched)
    # Raw text keeps the negations ("not", "no") that stopword removal drops
    scores = scorer.score_many([c.raw.text for c in comments])
    logger.info(f"Scoring {len(comments)} comments for {len(request.leaders)} leaders and {len(request.countries)} countries")

    result = AnalysisResult(
        request=request,
        comments=comments,
        leader_results=aggregate_entities(request.leaders, comments, scores, kind="leader"),
        country_results=aggregate_entities(request.countries, comments, scores, kind="country"),
        word_frequencies=top_words(comments, n),
        top_comments=top_extremes([c.raw for c in comments], scores, k),
    )
    logger.info(result.summary)
    return result
