"""Data models for RedditPulse."""

from dataclasses import dataclass, field
from typing import Optional, List

from .constants import FetchConstants


@dataclass(frozen=True)
class RawComment:
    """A single comment as fetched from Reddit."""
    text: str
    id: Optional[str] = None
    author: Optional[str] = None
    score: int = 0
    created_utc: Optional[float] = None
    thread_url: Optional[str] = None
    thread_title: Optional[str] = None


@dataclass(frozen=True)
class NormalizedComment:
    """A raw comment paired with its cleaned text."""
    raw: RawComment
    cleaned_text: str


@dataclass(frozen=True)
class SentimentResult:
    """Mean sentiment for one entity. ``average_sentiment`` is None when nothing mentions it."""
    entity: str
    average_sentiment: Optional[float]
    mentions: int = 0
    kind: str = "entity"

    @property
    def is_missing(self) -> bool:
        return self.average_sentiment is None


@dataclass(frozen=True)
class WordFrequency:
    word: str
    count: int


@dataclass(frozen=True)
class TopComments:
    """Most positive and most negative comments of a batch; score lists are index-aligned."""
    positive: List[RawComment] = field(default_factory=list)
    negative: List[RawComment] = field(default_factory=list)
    positive_scores: List[float] = field(default_factory=list)
    negative_scores: List[float] = field(default_factory=list)


@dataclass(frozen=True)
class FetchFailure:
    """Explicit "no data" signal returned by the fetcher."""
    reason: str


@dataclass(frozen=True)
class AnalysisRequest:
    """Everything one user-triggered analysis needs."""
    channel: str
    leaders: List[str] = field(default_factory=list)
    countries: List[str] = field(default_factory=list)
    sort: str = "top"
    period: str = "week"
    max_threads: int = 10

    def __post_init__(self):
        if not (self.channel or "").strip():
            raise ValueError("channel must not be empty")
        if self.sort not in FetchConstants.SORT_ORDERS:
            raise ValueError(f"Unknown sort order '{self.sort}', expected one of {FetchConstants.SORT_ORDERS}")
        if self.period not in FetchConstants.PERIODS:
            raise ValueError(f"Unknown period '{self.period}', expected one of {FetchConstants.PERIODS}")
        if self.max_threads < 1:
            raise ValueError("max_threads must be at least 1")


@dataclass(frozen=True)
class AnalysisResult:
    """All derived artifacts of one request, built in full before anyone sees them."""
    request: AnalysisRequest
    comments: List[NormalizedComment]
    leader_results: List[SentimentResult]
    country_results: List[SentimentResult]
    word_frequencies: List[WordFrequency]
    top_comments: TopComments

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    @property
    def entity_results(self) -> List[SentimentResult]:
        """Leaders then countries, each in input order."""
        return list(self.leader_results) + list(self.country_results)

    @property
    def summary(self) -> str:
        return f"Analyzed {self.comment_count} comments from the {self.request.channel} channel"
