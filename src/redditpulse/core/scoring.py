"""Entity sentiment aggregation and extreme-comment selection."""

import logging
import math
from typing import Iterable, List, Optional, Sequence

from .constants import AnalysisConstants
from .exceptions import ContractViolation
from .models import RawComment, NormalizedComment, SentimentResult, TopComments

logger = logging.getLogger(__name__)


def _is_nan(x) -> bool:
    try:
        return math.isnan(x)
    except TypeError:
        return True


def mean_ignoring_nan(scores: Iterable[float]) -> Optional[float]:
    """Arithmetic mean of the non-NaN scores, or None if there are none."""
    valid = [float(s) for s in scores if s is not None and not _is_nan(s)]
    if not valid:
        return None
    return sum(valid) / len(valid)


def _mentions(entity: str, comment: NormalizedComment) -> bool:
    needle = entity.strip().lower()
    return bool(needle) and needle in comment.cleaned_text.lower()


def mentions(entity: str, comments: Iterable[NormalizedComment]) -> List[NormalizedComment]:
    """Comments whose cleaned text contains ``entity`` as a case-insensitive substring.

    This is a plain substring test, so "iran" also matches "iranian".
    """
    return [c for c in comments if _mentions(entity, c)]


def aggregate_entities(
    entities: Sequence[str],
    comments: Sequence[NormalizedComment],
    scores: Sequence[float],
    kind: str = "entity",
) -> List[SentimentResult]:
    """Mean sentiment per entity over the comments mentioning it.

    ``scores`` is index-aligned with ``comments`` and holds each comment's
    score in [-1, 1] or NaN. Mentions are found in the cleaned text. Returns
    exactly one result per input entity, in input order; duplicates are
    computed independently. NaN scores are left out of the mean, and an
    entity with no usable match gets ``average_sentiment=None``.
    """
    if len(comments) != len(scores):
        raise ContractViolation(
            f"Got {len(comments)} comments but {len(scores)} scores; they must be index-aligned"
        )
    results = []
    for entity in entities:
        matched = [s for c, s in zip(comments, scores) if _mentions(entity, c)]
        avg = mean_ignoring_nan(matched)
        results.append(SentimentResult(entity=entity, average_sentiment=avg, mentions=len(matched), kind=kind))
        logger.debug(f"{kind} '{entity}': {len(matched)} mentions, average={avg}")
    return results


def top_extremes(
    comments: Sequence[RawComment],
    scores: Sequence[float],
    k: int = AnalysisConstants.DEFAULT_TOP_COMMENTS,
) -> TopComments:
    """Pick the ``k`` most positive and ``k`` most negative comments.

    Both sorts are stable, so equal scores keep fetch order. Comments with a
    NaN score are not ranked.
    """
    if len(comments) != len(scores):
        raise ContractViolation(
            f"Got {len(comments)} comments but {len(scores)} scores; they must be index-aligned"
        )
    if k <= 0:
        return TopComments()

    scored = [(c, float(s)) for c, s in zip(comments, scores) if not _is_nan(s)]
    by_desc = sorted(scored, key=lambda pair: -pair[1])[:k]
    by_asc = sorted(scored, key=lambda pair: pair[1])[:k]
    return TopComments(
        positive=[c for c, _ in by_desc],
        negative=[c for c, _ in by_asc],
        positive_scores=[s for _, s in by_desc],
        negative_scores=[s for _, s in by_asc],
    )
