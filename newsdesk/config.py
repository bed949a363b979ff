"""
Configuration and application state management.
"""

import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from fastapi import HTTPException

if TYPE_CHECKING:
    from .store import SupabaseStore
    from .feeds import FeedParser
    from .ranker import Ranker
    from .providers import LLMProvider

# Load environment variables
load_dotenv()


class Config:
    """Application configuration from environment."""
    # Supabase project (auth admin API + tables)
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_SERVICE_ROLE_KEY: str = os.getenv("SUPABASE_SERVICE_ROLE_KEY", "")

    # Completions API used to rank the daily scan
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    RANKING_MODEL: str = os.getenv("RANKING_MODEL", "davinci-002")

    PORT: int = int(os.getenv("PORT", "5001"))
    CORS_ORIGIN: str = os.getenv("CORS_ORIGIN", "http://localhost:3000")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def has_store_credentials(cls) -> bool:
        """Check if the Supabase URL and service key are both configured."""
        return bool(cls.SUPABASE_URL and cls.SUPABASE_SERVICE_ROLE_KEY)


config = Config()


class AppState:
    """Shared application state."""
    store: "SupabaseStore | None" = None
    feed_parser: "FeedParser | None" = None
    provider: "LLMProvider | None" = None  # None when OPENAI_API_KEY is unset
    ranker: "Ranker | None" = None


state = AppState()


def get_store() -> "SupabaseStore":
    """Dependency to get the store client."""
    if not state.store:
        raise HTTPException(status_code=500, detail="Store not initialized")
    return state.store


def get_feed_parser() -> "FeedParser":
    """Dependency to get the feed parser."""
    if not state.feed_parser:
        raise HTTPException(status_code=500, detail="Feed parser not initialized")
    return state.feed_parser
