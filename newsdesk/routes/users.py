"""
User routes: account removal.
"""

from fastapi import APIRouter

from ..schemas import MessageResponse
from ..services import UserServiceDep

router = APIRouter(tags=["users"])


# Plain def: runs in the threadpool since the supabase client blocks
@router.delete("/delete-user/{user_id}")
def delete_user(user_id: str, service: UserServiceDep) -> MessageResponse:
    """Delete a user from auth and the users table."""
    return MessageResponse(message=service.delete_user(user_id))
