"""
Supabase store client.

Wraps the supabase SDK behind the handful of operations the API needs:
- Auth admin user deletion
- `users` row deletion (returning the deleted rows)
- `scan_logs` insert and date-filtered select

SDK errors are translated to StoreError so services never handle SDK types.
"""

import logging
from datetime import datetime, timezone

from supabase import AuthApiError, AuthError, Client, PostgrestAPIError, create_client

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """An auth or table operation failed upstream."""


class AuthUserNotFound(StoreError):
    """The auth subsystem has no user with the given id."""


def _is_user_not_found(error: AuthApiError) -> bool:
    return (
        getattr(error, "code", None) == "user_not_found"
        or error.message == "User not found"
    )


class SupabaseStore:
    """Auth and table access for users and scan logs."""

    USERS_TABLE = "users"
    SCAN_LOGS_TABLE = "scan_logs"

    def __init__(self, client: Client):
        self.client = client

    @classmethod
    def from_credentials(cls, url: str, service_role_key: str) -> "SupabaseStore":
        """Create a store using a service-role key (required for auth admin calls)."""
        return cls(create_client(url, service_role_key))

    def delete_auth_user(self, user_id: str) -> None:
        """
        Delete a user from Supabase auth.

        Raises:
            AuthUserNotFound: If auth has no such user
            StoreError: For any other auth failure
        """
        try:
            self.client.auth.admin.delete_user(user_id)
        except AuthApiError as e:
            if _is_user_not_found(e):
                raise AuthUserNotFound(e.message) from e
            raise StoreError(e.message) from e
        except AuthError as e:
            raise StoreError(e.message) from e

    def delete_user_rows(self, user_id: str) -> list[dict]:
        """Delete `users` rows matching the id and return the deleted rows."""
        try:
            response = (
                self.client.table(self.USERS_TABLE)
                .delete()
                .eq("id", user_id)
                .execute()
            )
        except PostgrestAPIError as e:
            raise StoreError(e.message or str(e)) from e
        return response.data or []

    def record_scan(self, scan_date: datetime) -> None:
        """Insert a scan-log row stamped with the given time."""
        try:
            self.client.table(self.SCAN_LOGS_TABLE).insert(
                {"scan_date": _to_utc_iso(scan_date)}
            ).execute()
        except PostgrestAPIError as e:
            raise StoreError(e.message or str(e)) from e

    def scans_since(self, since: datetime) -> list[dict]:
        """Return scan-log rows with scan_date at or after `since`."""
        try:
            response = (
                self.client.table(self.SCAN_LOGS_TABLE)
                .select("*")
                .gte("scan_date", _to_utc_iso(since))
                .execute()
            )
        except PostgrestAPIError as e:
            raise StoreError(e.message or str(e)) from e
        return response.data or []


def _to_utc_iso(value: datetime) -> str:
    """Format an aware datetime as a UTC ISO-8601 string (naive means local time)."""
    return value.astimezone(timezone.utc).isoformat()
