"""
Pytest fixtures for backend tests.
"""

import asyncio
import time
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

import httpx
import pytest
from fastapi.testclient import TestClient

from newsdesk.config import state
from newsdesk.feeds import FeedParser
from newsdesk.providers.base import LLMProvider, LLMResponse
from newsdesk.ranker import Ranker
from newsdesk.server import app
from newsdesk.store import AuthUserNotFound, StoreError


class FakeStore:
    """In-memory stand-in for SupabaseStore."""

    def __init__(self):
        self.auth_users: set[str] = set()
        self.users: list[dict] = []
        self.scan_logs: list[dict] = []
        self.auth_error: str | None = None
        self.table_error: str | None = None

    def delete_auth_user(self, user_id: str) -> None:
        if self.auth_error:
            raise StoreError(self.auth_error)
        if user_id not in self.auth_users:
            raise AuthUserNotFound("User not found")
        self.auth_users.discard(user_id)

    def delete_user_rows(self, user_id: str) -> list[dict]:
        if self.table_error:
            raise StoreError(self.table_error)
        deleted = [row for row in self.users if row["id"] == user_id]
        self.users = [row for row in self.users if row["id"] != user_id]
        return deleted

    def record_scan(self, scan_date: datetime) -> None:
        if self.table_error:
            raise StoreError(self.table_error)
        self.scan_logs.append({"scan_date": scan_date})

    def scans_since(self, since: datetime) -> list[dict]:
        if self.table_error:
            raise StoreError(self.table_error)
        return [row for row in self.scan_logs if row["scan_date"] >= since]


class FakeFeedParser(FeedParser):
    """FeedParser serving canned documents instead of downloading."""

    def __init__(self):
        super().__init__()
        self.documents: dict[str, str | Exception] = {}
        self.requested: list[str] = []

    async def _download(self, url: str) -> str:
        self.requested.append(url)
        document = self.documents.get(url)
        if document is None:
            raise ConnectionError(f"Cannot connect to {url}")
        if isinstance(document, Exception):
            raise document
        return document


class MockProvider(LLMProvider):
    """Mock LLM provider that returns pre-configured responses."""

    def __init__(self, text: str = "", error: Exception | None = None):
        self.calls: list[dict] = []
        self.text = text
        self.error = error

    @property
    def name(self) -> str:
        return "mock"

    def complete(
        self,
        prompt: str,
        model: str | None = None,
        max_tokens: int = 100,
        temperature: float = 0.7,
        stop: list[str] | None = None,
    ) -> LLMResponse:
        self.calls.append({
            "prompt": prompt,
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "stop": stop,
        })
        if self.error:
            raise self.error
        return LLMResponse(text=self.text, model=model or "mock")


def rss_document(items: list[dict], title: str = "Test Feed") -> str:
    """Build an RSS 2.0 document from dicts with guid, title, published, content."""
    entries = []
    for item in items:
        pub_date = ""
        if item.get("published"):
            pub_date = f"<pubDate>{format_datetime(item['published'])}</pubDate>"
        entries.append(f"""
        <item>
            <title>{item['title']}</title>
            <link>https://example.com/{item['guid']}</link>
            <guid isPermaLink="false">{item['guid']}</guid>
            {pub_date}
            <description>{item.get('content', '')}</description>
        </item>""")
    return f"""<?xml version="1.0" encoding="UTF-8"?>
    <rss version="2.0">
        <channel>
            <title>{title}</title>
            <link>https://example.com/</link>
            <description>Test feed</description>
            {''.join(entries)}
        </channel>
    </rss>"""


@pytest.fixture
def now():
    """Current time in UTC."""
    return datetime.now(timezone.utc)


@pytest.fixture
def yesterday(now):
    """A moment certainly before local midnight today."""
    return now - timedelta(days=1)


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def fake_parser():
    return FakeFeedParser()


@pytest.fixture
def mock_provider():
    return MockProvider(text="  https://a.example/feed_a1, https://b.example/feed_b1  ")


def _swap_state(store, feed_parser, provider):
    original = (state.store, state.feed_parser, state.provider, state.ranker)
    state.store = store
    state.feed_parser = feed_parser
    state.provider = provider
    state.ranker = Ranker(provider=provider) if provider else None
    return original


def _restore_state(original):
    state.store, state.feed_parser, state.provider, state.ranker = original


@pytest.fixture
def client(fake_store, fake_parser, mock_provider):
    """Test client with in-memory store, canned feeds and a mock LLM."""
    original = _swap_state(fake_store, fake_parser, mock_provider)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    _restore_state(original)


@pytest.fixture
def client_without_llm(fake_store, fake_parser):
    """Test client with no completion credential configured."""
    original = _swap_state(fake_store, fake_parser, None)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    _restore_state(original)


@pytest.fixture
def make_rss():
    """Factory for RSS documents."""
    return rss_document


@pytest.fixture
def send_concurrently():
    """Send several requests to the app at once over ASGI; returns responses in order."""
    def send(*requests: tuple[str, str, dict]) -> list[httpx.Response]:
        async def _send():
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
                return await asyncio.gather(*(
                    ac.request(method, url, **kwargs) for method, url, kwargs in requests
                ))
        return asyncio.run(_send())
    return send


@pytest.fixture
def new_york_tz(monkeypatch):
    """Run with the process local timezone set to America/New_York."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
