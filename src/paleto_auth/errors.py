"""
paleto_auth.errors

Failure taxonomy for the Discord login flow.

Each error carries the opaque `reason` code the callback appends to the
frontend redirect (`?error=<reason>`); no other detail reaches the browser.
"""

from __future__ import annotations


class LoginError(Exception):
    reason: str = "auth_failed"


class AuthExchangeError(LoginError):
    pass


class ProfileFetchError(LoginError):
    pass


class MembershipNotFound(LoginError):
    # API failure and genuine absence both end up here.
    def __init__(self, reason: str, user_id: str) -> None:
        super().__init__(f"no membership facts for user {user_id}")
        self.reason = reason
        self.user_id = user_id


class SessionPersistError(LoginError):
    reason = "session_error"


# --- Module Notes -----------------------------------------------------------
# Anything else escaping the login flow is reported as `auth_failed` by the router.
