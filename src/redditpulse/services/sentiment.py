"""Lexicon-based sentiment scoring."""

import logging
import math
from typing import Dict, Any, Iterable, List
from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

logger = logging.getLogger(__name__)

POSITIVE_THRESHOLD = 0.05
NEGATIVE_THRESHOLD = -0.05


def compound_to_label(compound: float) -> str:
    """Map a VADER compound score to POSITIVE / NEUTRAL / NEGATIVE."""
    if math.isnan(compound):
        return "UNSCORED"
    if compound >= POSITIVE_THRESHOLD:
        return "POSITIVE"
    if compound <= NEGATIVE_THRESHOLD:
        return "NEGATIVE"
    return "NEUTRAL"


class VADERSentimentAnalyzer:
    """VADER sentiment analyzer."""

    def __init__(self):
        self.analyzer = SentimentIntensityAnalyzer()

    def score(self, text: str) -> float:
        """Compound score in [-1, 1]; NaN for text with nothing to score."""
        if not (text or "").strip():
            return float("nan")
        return float(self.analyzer.polarity_scores(text)["compound"])

    def score_many(self, texts: Iterable[str]) -> List[float]:
        return [self.score(t) for t in texts]

    def analyze(self, text: str) -> Dict[str, Any]:
        """Analyze sentiment of text."""
        compound = self.score(text)
        return {
            "compound": compound,
            "label": compound_to_label(compound),
        }
