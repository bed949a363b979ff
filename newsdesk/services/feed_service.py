"""
Feed service: feed URL validation.
"""

import logging

from fastapi import HTTPException

from ..exceptions import server_error
from ..feeds import FeedParser

logger = logging.getLogger(__name__)


class FeedService:
    """Service for feed-related checks."""

    def __init__(self, feed_parser: FeedParser):
        self.feed_parser = feed_parser

    async def validate(self, url: str) -> str:
        """
        Fetch a URL once and check that it parses as a feed.

        Returns:
            Success message

        Raises:
            HTTPException: 400 if the document is not a feed,
                500 if fetching or parsing raised
        """
        try:
            feed = await self.feed_parser.fetch(url)
        except Exception as e:
            logger.error(f"Error parsing RSS feed {url}: {e}")
            raise server_error("Error parsing RSS feed")

        if feed is None:
            logger.warning(f"Not a feed: {url}")
            raise HTTPException(status_code=400, detail="Invalid RSS feed format")

        logger.info(f"Validated feed \"{feed.title}\" at {url} ({len(feed.items)} items)")
        return "RSS feed is valid"
