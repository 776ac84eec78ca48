"""Reddit data collection service."""

import logging
import time
from typing import List, Optional, Union

import praw
from praw.models import MoreComments

from ..core.config import settings
from ..core.constants import FetchConstants
from ..core.models import RawComment, FetchFailure

logger = logging.getLogger(__name__)

REDDIT_BASE_URL = "https://www.reddit.com"


class FetchDeadlineExceeded(TimeoutError):
    """The whole fetch ran past ``settings.fetch_deadline``."""


class RedditService:
    """Fetches threads and their comments for one subreddit.

    Every failure is reported as a :class:`FetchFailure` value; nothing raised
    by PRAW escapes :meth:`fetch_comments`.
    """

    def __init__(self, reddit=None):
        self.reddit = reddit
        if self.reddit is None:
            self._init_reddit()

    def _init_reddit(self):
        """Initialize Reddit client."""
        if settings.has_reddit_credentials:
            try:
                self.reddit = praw.Reddit(
                    client_id=settings.reddit_client_id,
                    client_secret=settings.reddit_client_secret,
                    user_agent=settings.reddit_user_agent,
                    timeout=int(settings.fetch_timeout),
                )
                logger.info("Reddit client initialized successfully")
            except Exception as e:
                logger.error(f"Failed to initialize Reddit client: {e}")
                self.reddit = None
        else:
            logger.warning("Reddit credentials not provided, fetching is disabled")

    def list_threads(self, channel: str, sort: str, period: str, limit: int) -> List[str]:
        """Return permalink URLs of up to ``limit`` threads in ``channel``."""
        sr = self.reddit.subreddit(channel)
        listing = getattr(sr, sort)
        if sort in FetchConstants.TIME_FILTERED_SORTS:
            submissions = listing(time_filter=period, limit=limit)
        else:
            submissions = listing(limit=limit)

        urls = []
        for sub in submissions:
            permalink = getattr(sub, "permalink", None)
            if permalink:
                urls.append(f"{REDDIT_BASE_URL}{permalink}")
        return urls[:limit]

    def get_comments(self, urls: List[str], deadline: Optional[float] = None) -> List[RawComment]:
        """Load the comment trees of ``urls``, flattened in thread order."""
        comments = []
        for url in urls:
            if deadline is not None and time.monotonic() > deadline:
                raise FetchDeadlineExceeded(f"fetch exceeded {settings.fetch_deadline:.0f}s")

            sub = self.reddit.submission(url=url)
            sub.comments.replace_more(limit=settings.comment_expand_limit)
            title = getattr(sub, "title", None)
            kept = 0
            for c in sub.comments.list():
                if isinstance(c, MoreComments):
                    continue
                body = (getattr(c, "body", "") or "").strip()
                if not body or body in FetchConstants.SKIPPED_BODIES:
                    continue
                author = getattr(c, "author", None)
                comments.append(RawComment(
                    text=body,
                    id=getattr(c, "id", None),
                    author=str(author) if author else None,
                    score=int(getattr(c, "score", 0) or 0),
                    created_utc=getattr(c, "created_utc", None),
                    thread_url=url,
                    thread_title=title,
                ))
                kept += 1
            logger.debug(f"{url}: kept {kept} comments")
        return comments

    def fetch_comments(
        self, channel: str, period: str, sort: str, max_threads: int
    ) -> Union[List[RawComment], FetchFailure]:
        """Fetch every comment of the top ``max_threads`` threads of ``channel``.

        Returns a non-empty list on success, otherwise a FetchFailure with a
        readable reason. Partial results are never returned.
        """
        if self.reddit is None:
            return FetchFailure("Reddit credentials are not configured (set REDDIT_CLIENT_ID and REDDIT_CLIENT_SECRET)")

        start_time = time.monotonic()
        deadline = start_time + settings.fetch_deadline
        logger.info(f"Fetching up to {max_threads} '{sort}' threads from r/{channel} (period={period})")
        try:
            urls = self.list_threads(channel, sort, period, max_threads)
            if not urls:
                return FetchFailure(f"No threads found in r/{channel}")
            comments = self.get_comments(urls, deadline=deadline)
        except FetchDeadlineExceeded as e:
            logger.error(f"Reddit fetch timed out for r/{channel}: {e}")
            return FetchFailure(f"Timed out fetching r/{channel}: {e}")
        except Exception as e:
            logger.error(f"Reddit fetch failed for r/{channel}: {e}")
            return FetchFailure(f"Could not fetch comments from r/{channel}: {e}")

        elapsed = time.monotonic() - start_time
        if not comments:
            logger.warning(f"r/{channel}: {len(urls)} threads but no usable comments")
            return FetchFailure(f"No comments found in r/{channel}")
        logger.info(f"✅ Fetched {len(comments)} comments from {len(urls)} threads in {elapsed:.1f}s")
        return comments
