"""
User service: removal of a user from auth and the users table.
"""

import logging

from fastapi import HTTPException

from ..exceptions import require_deleted, server_error
from ..store import AuthUserNotFound, StoreError, SupabaseStore

logger = logging.getLogger(__name__)


class UserService:
    """Service for user account removal."""

    def __init__(self, store: SupabaseStore):
        self.store = store

    def delete_user(self, user_id: str) -> str:
        """
        Delete a user from auth, then from the users table.

        Both stores are always attempted; a user already missing from auth
        still has its row removed. There is no transaction across the two.

        Returns:
            Success message

        Raises:
            HTTPException: 404 if no row was deleted, 500 on upstream failure
        """
        logger.info(f"Received request to delete user with ID: {user_id}")
        try:
            self._delete_auth_user(user_id)
            self._delete_user_row(user_id)
        except HTTPException:
            raise
        except Exception as e:
            logger.exception(f"Unexpected error deleting user {user_id}: {e}")
            raise server_error("Unexpected error occurred while deleting user.")

        logger.info(f"User deleted successfully: {user_id}")
        return "User deleted successfully from both authentication and users table."

    def _delete_auth_user(self, user_id: str) -> None:
        try:
            self.store.delete_auth_user(user_id)
        except AuthUserNotFound:
            logger.warning(f"User not found in authentication: {user_id}")
        except StoreError as e:
            logger.error(f"Error deleting user from authentication: {e}")
            raise server_error(f"Failed to delete user from authentication: {e}")

    def _delete_user_row(self, user_id: str) -> None:
        try:
            deleted = self.store.delete_user_rows(user_id)
        except StoreError as e:
            logger.error(f"Error deleting user from users table: {e}")
            raise server_error(f"Failed to delete user from users table: {e}")

        if not deleted:
            logger.warning(f"No user was deleted from users table: {user_id}")
        require_deleted(
            deleted,
            "No user was deleted from users table. "
            "Please ensure the user exists and you have the right permissions."
        )
