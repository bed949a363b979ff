"""
Service layer for business logic.

Services encapsulate business logic, keeping routes as thin HTTP adapters.
Each service receives its dependencies via constructor injection.

Usage in routes:
    from ..services import ScanServiceDep

    @router.get("/check-scan")
    def check_scan(service: ScanServiceDep):
        return ScanStatusResponse(scan_done=service.is_scan_done())
"""

from typing import Annotated

from fastapi import Depends

from ..config import state, get_store, get_feed_parser
from ..feeds import FeedParser
from ..store import SupabaseStore

from .feed_service import FeedService
from .scan_service import ScanService, start_of_today
from .user_service import UserService

__all__ = [
    # Services
    "FeedService",
    "ScanService",
    "UserService",
    "start_of_today",
    # Dependency factories
    "get_feed_service",
    "get_scan_service",
    "get_user_service",
    # Type aliases for dependency injection
    "FeedServiceDep",
    "ScanServiceDep",
    "UserServiceDep",
]


def get_user_service(store: Annotated[SupabaseStore, Depends(get_store)]) -> UserService:
    """Dependency to get UserService instance."""
    return UserService(store=store)


def get_feed_service(
    feed_parser: Annotated[FeedParser, Depends(get_feed_parser)]
) -> FeedService:
    """Dependency to get FeedService instance."""
    return FeedService(feed_parser=feed_parser)


def get_scan_service(
    store: Annotated[SupabaseStore, Depends(get_store)],
    feed_parser: Annotated[FeedParser, Depends(get_feed_parser)],
) -> ScanService:
    """Dependency to get ScanService instance (ranker is None without an API key)."""
    return ScanService(
        store=store,
        feed_parser=feed_parser,
        ranker=state.ranker,
    )


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
FeedServiceDep = Annotated[FeedService, Depends(get_feed_service)]
ScanServiceDep = Annotated[ScanService, Depends(get_scan_service)]
