"""Test the Reddit comment fetcher against a mocked PRAW client."""

import time

import pytest
from unittest.mock import Mock, patch

from redditpulse.core.config import settings
from redditpulse.core.models import FetchFailure, RawComment
from redditpulse.services.reddit_client import FetchDeadlineExceeded, RedditService


def _comment(body, cid="c1", author="alice", score=1):
    c = Mock()
    c.body = body
    c.id = cid
    c.author = author
    c.score = score
    c.created_utc = 1700000000.0
    return c


def _mock_reddit(permalinks, comments_by_url):
    reddit = Mock()
    subs = [Mock(permalink=p) for p in permalinks]
    sr = reddit.subreddit.return_value
    for sort in ("hot", "new", "top", "rising", "controversial"):
        getattr(sr, sort).return_value = subs

    def submission(url=None):
        s = Mock()
        s.title = f"Thread {url}"
        s.comments.list.return_value = comments_by_url.get(url, [])
        return s

    reddit.submission.side_effect = submission
    return reddit


URL_A = "https://www.reddit.com/r/worldnews/comments/a/first/"
URL_B = "https://www.reddit.com/r/worldnews/comments/b/second/"


class TestRedditService:
    """Test fetching and failure reporting."""

    def setup_method(self):
        self.reddit = _mock_reddit(
            ["/r/worldnews/comments/a/first/", "/r/worldnews/comments/b/second/"],
            {
                URL_A: [_comment("Iran talks resume", "a1"), _comment("[deleted]", "a2"), _comment("   ", "a3")],
                URL_B: [_comment("China responds", "b1", author=None, score=7)],
            },
        )
        self.service = RedditService(reddit=self.reddit)

    def test_fetch_success(self):
        comments = self.service.fetch_comments("worldnews", "week", "top", 2)
        assert [c.text for c in comments] == ["Iran talks resume", "China responds"]
        assert all(isinstance(c, RawComment) for c in comments)
        assert comments[0].thread_url == URL_A
        assert comments[0].thread_title == f"Thread {URL_A}"
        assert comments[1].author is None
        assert comments[1].score == 7

    def test_top_listing_uses_period(self):
        self.service.fetch_comments("worldnews", "month", "top", 2)
        self.reddit.subreddit.assert_called_once_with("worldnews")
        self.reddit.subreddit.return_value.top.assert_called_once_with(time_filter="month", limit=2)

    def test_hot_listing_ignores_period(self):
        self.service.fetch_comments("worldnews", "month", "hot", 5)
        self.reddit.subreddit.return_value.hot.assert_called_once_with(limit=5)

    def test_expands_comment_trees(self):
        self.service.fetch_comments("worldnews", "week", "top", 2)
        assert self.reddit.submission.call_count == 2
        self.reddit.submission.assert_any_call(url=URL_A)

    def test_no_threads_is_failure(self):
        service = RedditService(reddit=_mock_reddit([], {}))
        outcome = service.fetch_comments("emptysub", "week", "top", 5)
        assert isinstance(outcome, FetchFailure)
        assert "No threads" in outcome.reason

    def test_no_comments_is_failure(self):
        service = RedditService(reddit=_mock_reddit(["/r/x/comments/a/first/"], {}))
        outcome = service.fetch_comments("x", "week", "top", 5)
        assert isinstance(outcome, FetchFailure)
        assert "No comments" in outcome.reason

    def test_service_error_is_failure_not_exception(self):
        self.reddit.subreddit.side_effect = RuntimeError("503 Service Unavailable")
        outcome = self.service.fetch_comments("worldnews", "week", "top", 2)
        assert isinstance(outcome, FetchFailure)
        assert "503" in outcome.reason

    def test_error_mid_fetch_returns_no_partial_data(self):
        def flaky(url=None):
            if url == URL_B:
                raise ConnectionError("reset by peer")
            s = Mock()
            s.comments.list.return_value = [_comment("first thread comment")]
            return s

        self.reddit.submission.side_effect = flaky
        outcome = self.service.fetch_comments("worldnews", "week", "top", 2)
        assert isinstance(outcome, FetchFailure)

    def test_deadline_expiry_is_failure(self):
        with patch.object(settings, "fetch_deadline", -1.0):
            outcome = self.service.fetch_comments("worldnews", "week", "top", 2)
        assert isinstance(outcome, FetchFailure)
        assert "Timed out" in outcome.reason

    def test_get_comments_checks_deadline(self):
        with pytest.raises(FetchDeadlineExceeded):
            self.service.get_comments([URL_A], deadline=time.monotonic() - 1)

    def test_list_threads_builds_urls(self):
        assert self.service.list_threads("worldnews", "new", "day", 10) == [URL_A, URL_B]


class TestRedditServiceInit:
    """Test client construction from settings."""

    @patch('redditpulse.services.reddit_client.praw')
    def test_initialization_with_credentials(self, mock_praw):
        with patch('redditpulse.services.reddit_client.settings') as mock_settings:
            mock_settings.has_reddit_credentials = True
            mock_settings.reddit_client_id = "id"
            mock_settings.reddit_client_secret = "secret"
            mock_settings.reddit_user_agent = "ua"
            mock_settings.fetch_timeout = 16.0

            service = RedditService()
            assert service.reddit is mock_praw.Reddit.return_value
            mock_praw.Reddit.assert_called_once_with(
                client_id="id", client_secret="secret", user_agent="ua", timeout=16
            )

    @patch('redditpulse.services.reddit_client.praw')
    def test_initialization_without_credentials(self, mock_praw):
        with patch('redditpulse.services.reddit_client.settings') as mock_settings:
            mock_settings.has_reddit_credentials = False

            service = RedditService()
            assert service.reddit is None
            mock_praw.Reddit.assert_not_called()

            outcome = service.fetch_comments("worldnews", "week", "top", 5)
            assert isinstance(outcome, FetchFailure)
            assert "credentials" in outcome.reason
