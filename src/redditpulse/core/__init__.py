"""Core modules for RedditPulse."""

from .models import *
from .config import settings
from .exceptions import ContractViolation
from .text import normalize, normalize_comments, parse_entities, top_words
from .scoring import aggregate_entities, top_extremes

__all__ = [
    "settings",
    "RawComment",
    "NormalizedComment",
    "SentimentResult",
    "WordFrequency",
    "TopComments",
    "FetchFailure",
    "AnalysisRequest",
    "AnalysisResult",
    "ContractViolation",
    "normalize",
    "normalize_comments",
    "parse_entities",
    "top_words",
    "aggregate_entities",
    "top_extremes",
]
