"""Shared fixtures and fakes for RedditPulse tests."""

import pytest

from redditpulse.core.models import RawComment


class FakeFetcher:
    """Stands in for RedditService; returns a canned outcome and records calls."""

    def __init__(self, outcome):
        self.outcome = outcome
        self.calls = []

    def fetch_comments(self, channel, period, sort, max_threads):
        self.calls.append((channel, period, sort, max_threads))
        return self.outcome


class FakeScorer:
    """Looks text up in a dict; unknown text scores 0.0."""

    def __init__(self, scores=None, default=0.0):
        self.scores = scores or {}
        self.default = default
        self.calls = 0

    def score(self, text):
        self.calls += 1
        return self.scores.get(text, self.default)

    def score_many(self, texts):
        return [self.score(t) for t in texts]


@pytest.fixture
def trump_comments():
    return [
        RawComment(text="I love Trump", id="c1"),
        RawComment(text="I hate Trump", id="c2"),
        RawComment(text="Trump is great", id="c3"),
    ]


@pytest.fixture
def trump_scorer():
    return FakeScorer({"I love Trump": 0.8, "I hate Trump": -0.6, "Trump is great": 0.7})


