"""
Pydantic models for API request/response validation.

Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .models import Article


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ─────────────────────────────────────────────────────────────
# Requests
# ─────────────────────────────────────────────────────────────

class ValidateFeedRequest(CamelModel):
    """Request to check that a URL serves a feed."""
    url: str


class FetchArticlesRequest(CamelModel):
    """Request for today's articles and a ranked selection."""
    feeds: list[str]
    open_ai_context: str


# ─────────────────────────────────────────────────────────────
# Responses
# ─────────────────────────────────────────────────────────────

class MessageResponse(CamelModel):
    """Plain status message."""
    message: str


class ScanStatusResponse(CamelModel):
    """Whether today's scan has already run."""
    scan_done: bool


class ArticleResponse(CamelModel):
    """Article picked up by the daily scan."""
    id: str
    title: str
    link: str
    pub_date: str | None
    content: str

    @classmethod
    def from_article(cls, article: Article) -> "ArticleResponse":
        return cls(
            id=article.id,
            title=article.title,
            link=article.link,
            pub_date=article.pub_date,
            content=article.content,
        )


class FetchArticlesResponse(CamelModel):
    """Today's articles plus the model's ranked IDs."""
    articles: list[ArticleResponse]
    top_articles: str
