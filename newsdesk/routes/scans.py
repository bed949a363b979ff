"""
Scan routes: daily fetch-and-rank and its status.
"""

from fastapi import APIRouter

from ..schemas import (
    ArticleResponse,
    FetchArticlesRequest,
    FetchArticlesResponse,
    ScanStatusResponse,
)
from ..services import ScanServiceDep

router = APIRouter(tags=["scans"])


# Plain def: runs in the threadpool since the supabase client blocks
@router.get("/check-scan")
def check_scan(service: ScanServiceDep) -> ScanStatusResponse:
    """Report whether today's scan has already run."""
    return ScanStatusResponse(scan_done=service.is_scan_done())


@router.post("/fetch-articles")
async def fetch_articles(
    request: FetchArticlesRequest,
    service: ScanServiceDep
) -> FetchArticlesResponse:
    """
    Fetch today's articles from the given feeds and rank them.

    Records the day as scanned only when every step succeeds.
    """
    articles, top_articles = await service.run_scan(request.feeds, request.open_ai_context)
    return FetchArticlesResponse(
        articles=[ArticleResponse.from_article(a) for a in articles],
        top_articles=top_articles,
    )
