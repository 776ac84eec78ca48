"""RedditPulse - sentiment toward leaders and countries in Reddit comments."""

__version__ = "0.1.0"

from .core.models import *
from .core.config import settings
from .services.pipeline import run_analysis
from .services.reddit_client import RedditService
from .services.sentiment import VADERSentimentAnalyzer

__all__ = [
    "settings",
    "run_analysis",
    "RedditService",
    "VADERSentimentAnalyzer",
]
