"""Services for RedditPulse."""

from .reddit_client import RedditService
from .sentiment import VADERSentimentAnalyzer
from .pipeline import run_analysis

__all__ = [
    "RedditService",
    "VADERSentimentAnalyzer",
    "run_analysis",
]
