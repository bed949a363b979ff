"""
Feed Parser - Fetch and parse RSS/Atom feeds.

Handles:
- RSS 2.0 and Atom 1.0 formats
- Content fallback (full content, then plain-text snippet)
- Timezone-aware publication timestamps
"""

import aiohttp
import feedparser
from dataclasses import dataclass
from datetime import datetime, timezone
from bs4 import BeautifulSoup


@dataclass
class FeedItem:
    """Represents a single item/entry from a feed."""
    guid: str
    title: str
    link: str
    published: datetime | None  # UTC
    pub_date: str | None        # Publication date exactly as the feed wrote it
    content: str
    content_snippet: str


@dataclass
class Feed:
    """Represents a parsed feed."""
    url: str
    title: str
    items: list[FeedItem]


class FeedParser:
    """Downloads and parses RSS/Atom feeds."""

    def __init__(self, user_agent: str | None = None):
        self.user_agent = user_agent or "Newsdesk/1.0 (+https://github.com/newsdesk)"

    async def fetch(self, url: str) -> Feed | None:
        """
        Fetch and parse a feed URL.

        Returns None when the document is not recognisable as a feed.
        Network and HTTP errors propagate.
        """
        content = await self._download(url)
        return self._parse(url, content)

    async def _download(self, url: str) -> str:
        headers = {"User-Agent": self.user_agent}

        async with aiohttp.ClientSession() as session:
            async with session.get(url, headers=headers) as resp:
                resp.raise_for_status()
                return await resp.text()

    def _parse(self, url: str, content: str) -> Feed | None:
        """Parse feed content using feedparser."""
        parsed = feedparser.parse(content)

        # Not RSS/Atom at all (HTML page, garbage, empty body)
        if not parsed.get("version") and not parsed.entries:
            return None

        items = []
        for entry in parsed.entries:
            # Prefer full content (content:encoded / atom:content) over summary
            content_text = ""
            if hasattr(entry, "content") and entry.content:
                content_text = entry.content[0].value
            elif hasattr(entry, "summary"):
                content_text = entry.summary
            elif hasattr(entry, "description"):
                content_text = entry.description

            published = None
            pub_date = entry.get("published") or entry.get("updated")
            if hasattr(entry, "published_parsed") and entry.published_parsed:
                try:
                    published = datetime(*entry.published_parsed[:6], tzinfo=timezone.utc)
                except (TypeError, ValueError):
                    pass
            elif hasattr(entry, "updated_parsed") and entry.updated_parsed:
                try:
                    published = datetime(*entry.updated_parsed[:6], tzinfo=timezone.utc)
                except (TypeError, ValueError):
                    pass

            item_url = entry.get("link", "")
            if not item_url and hasattr(entry, "links"):
                for link in entry.links:
                    if link.get("rel") == "alternate" or link.get("type") == "text/html":
                        item_url = link.get("href", "")
                        break

            items.append(FeedItem(
                guid=entry.get("id") or item_url,
                title=entry.get("title", "Untitled"),
                link=item_url,
                published=published,
                pub_date=pub_date,
                content=content_text,
                content_snippet=_snippet(content_text),
            ))

        return Feed(
            url=url,
            title=parsed.feed.get("title", "Unknown Feed"),
            items=items,
        )


def _snippet(html: str) -> str:
    """Plain-text rendition of an HTML fragment."""
    if not html:
        return ""
    return BeautifulSoup(html, "html.parser").get_text(" ", strip=True)


def parse_feed_sync(content: str, url: str = "") -> Feed | None:
    """
    Synchronous feed parsing (for use when content is already fetched).

    Useful for testing or when you already have the feed content.
    """
    parser = FeedParser()
    return parser._parse(url, content)
