"""
Transient domain objects built per request.
"""

from dataclasses import dataclass

from .feeds import FeedItem


@dataclass
class Article:
    """A feed item picked up by the daily scan."""
    id: str          # "{feed_url}_{guid}", unique across feeds
    title: str
    link: str
    pub_date: str | None
    content: str

    @classmethod
    def from_item(cls, feed_url: str, item: FeedItem) -> "Article":
        return cls(
            id=f"{feed_url}_{item.guid}",
            title=item.title,
            link=item.link,
            pub_date=item.pub_date,
            content=item.content or item.content_snippet or "",
        )
