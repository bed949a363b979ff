"""
Scan service: the daily fetch-and-rank run and its status check.

A scan pulls today's items from the caller's feeds, asks the ranker for the
top picks, and only then writes a scan-log row. Any failure before the write
aborts the whole request, so a failed run never marks the day as scanned.
"""

import logging
from datetime import datetime, time, timezone

from fastapi import HTTPException
from starlette.concurrency import run_in_threadpool

from ..exceptions import server_error
from ..feeds import FeedParser
from ..models import Article
from ..ranker import Ranker
from ..store import StoreError, SupabaseStore

logger = logging.getLogger(__name__)


def start_of_today(now: datetime | None = None) -> datetime:
    """Local midnight of the current day, timezone-aware."""
    local_date = (now or datetime.now()).astimezone().date()
    # Resolve the offset at midnight itself; it differs from now on DST days
    return datetime.combine(local_date, time()).astimezone()


class ScanService:
    """Service for the daily article scan."""

    def __init__(
        self,
        store: SupabaseStore,
        feed_parser: FeedParser,
        ranker: Ranker | None = None,
    ):
        self.store = store
        self.feed_parser = feed_parser
        self.ranker = ranker

    def is_scan_done(self) -> bool:
        """Check whether a scan-log row exists since local midnight."""
        try:
            rows = self.store.scans_since(start_of_today())
        except StoreError as e:
            logger.error(f"Error checking scan logs: {e}")
            raise server_error("Error checking scan logs.")
        except Exception as e:
            logger.exception(f"Unexpected error checking scan logs: {e}")
            raise server_error("Unexpected error occurred while checking scan logs.")

        return len(rows) > 0

    async def run_scan(self, feeds: list[str], context: str) -> tuple[list[Article], str]:
        """
        Collect today's articles from each feed in order and rank them.

        Args:
            feeds: Feed URLs, processed one at a time
            context: Free-text guidance embedded verbatim in the prompt

        Returns:
            (articles, ranked IDs string from the model)

        Raises:
            HTTPException: 500 on the first feed, credential, model or store failure
        """
        try:
            return await self._run_scan(feeds, context)
        except HTTPException:
            raise
        except Exception as e:
            logger.exception(f"Error fetching articles: {e}")
            raise server_error("Error fetching articles")

    async def _run_scan(self, feeds: list[str], context: str) -> tuple[list[Article], str]:
        since = start_of_today()

        articles: list[Article] = []
        for feed_url in feeds:
            articles.extend(await self._todays_articles(feed_url, since))
        logger.info(f"Collected {len(articles)} articles from {len(feeds)} feeds")

        if self.ranker is None:
            logger.error("OpenAI API key is not set.")
            raise server_error("OpenAI API key is not set.")

        try:
            top_articles = await self.ranker.rank(articles, context)
        except Exception as e:
            logger.error(f"Error during OpenAI request: {e}")
            raise server_error("Error during OpenAI request")

        try:
            await run_in_threadpool(self.store.record_scan, datetime.now(timezone.utc))
        except StoreError as e:
            logger.error(f"Error recording scan log: {e}")
            raise server_error("Error recording scan log.")

        return articles, top_articles

    async def _todays_articles(self, feed_url: str, since: datetime) -> list[Article]:
        """Fetch one feed and keep the items published at or after `since`."""
        try:
            feed = await self.feed_parser.fetch(feed_url)
            if feed is None:
                raise ValueError("document is not an RSS/Atom feed")
        except Exception as e:
            logger.error(f"Error fetching articles from {feed_url}: {e}")
            raise server_error(f"Error fetching articles from {feed_url}")

        todays = [
            Article.from_item(feed_url, item)
            for item in feed.items
            if item.published is not None and item.published >= since
        ]
        logger.info(f"{feed.title}: {len(todays)} of {len(feed.items)} items are from today")
        return todays
