"""
Feed routes: URL validation.
"""

from fastapi import APIRouter

from ..schemas import MessageResponse, ValidateFeedRequest
from ..services import FeedServiceDep

router = APIRouter(tags=["feeds"])


@router.post("/validate-feed")
async def validate_feed(
    request: ValidateFeedRequest,
    service: FeedServiceDep
) -> MessageResponse:
    """Check that a URL serves a parseable RSS/Atom feed."""
    return MessageResponse(message=await service.validate(request.url))
