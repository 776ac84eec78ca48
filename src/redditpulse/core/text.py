"""Text normalization and word frequency analysis."""

import logging
import re
from collections import Counter
from typing import Iterable, List

from .constants import STOPWORDS, ALL_STOPWORDS, AnalysisConstants
from .models import RawComment, NormalizedComment, WordFrequency

logger = logging.getLogger(__name__)

# Anything that is neither a word character nor whitespace, plus underscore
PUNCT_RE = re.compile(r"[^\w\s]|_")
WS_RE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Lowercase, strip punctuation and digits, drop stopwords, collapse whitespace.

    Punctuation is removed rather than replaced, so ``"don't"`` becomes ``"dont"``.
    Stopwords are matched as whole tokens after the earlier steps.
    """
    if not text:
        return ""
    t = text.lower()
    t = PUNCT_RE.sub("", t)
    # str.isnumeric() also covers superscripts and vulgar fractions ("²", "½")
    t = "".join(ch for ch in t if not ch.isnumeric())
    return " ".join(tok for tok in WS_RE.split(t) if tok and tok not in STOPWORDS)


def normalize_comments(comments: Iterable[RawComment]) -> List[NormalizedComment]:
    return [NormalizedComment(raw=c, cleaned_text=normalize(c.text)) for c in comments]


def parse_entities(raw: str) -> List[str]:
    """Split a comma-separated name list, trimming items and dropping blanks."""
    return [name.strip() for name in (raw or "").split(",") if name.strip()]


def tokenize(cleaned_text: str) -> List[str]:
    return (cleaned_text or "").split()


def top_words(comments: Iterable[NormalizedComment], n: int = AnalysisConstants.DEFAULT_TOP_WORDS) -> List[WordFrequency]:
    """Rank the most frequent tokens across the batch.

    Tokens shorter than three characters and anything in the standard or
    extended stopword sets are ignored. Every occurrence counts, not every
    comment. Ties keep the order in which words were first seen.
    """
    if n <= 0:
        return []
    counts = Counter()
    for comment in comments:
        counts.update(
            tok for tok in tokenize(comment.cleaned_text)
            if len(tok) >= AnalysisConstants.MIN_TOKEN_LENGTH and tok not in ALL_STOPWORDS
        )
    # most_common() is a stable sort, so ties stay in first-seen order
    ranked = [WordFrequency(word=w, count=c) for w, c in counts.most_common(n)]
    logger.debug(f"Counted {len(counts)} distinct words, returning top {len(ranked)}")
    return ranked
