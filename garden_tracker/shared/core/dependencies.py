"""
Common FastAPI dependencies for the Garden Tracker.
Provides the session gate: every plant and catalog route depends on
get_current_user, which verifies the bearer token with Supabase Auth.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config.settings import Settings, get_settings
from ..config.supabase import SupabaseManager, get_supabase_manager
from ..utils.logging import bind_user_id
from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)

# auto_error=False so a missing header becomes our AuthenticationError, not a bare 403
bearer_scheme = HTTPBearer(auto_error=False)


class CurrentUser:
    """Authenticated user as reported by Supabase Auth."""

    def __init__(
        self,
        user_id: UUID,
        email: Optional[str] = None,
        token_payload: Optional[Dict[str, Any]] = None
    ):
        self.user_id = user_id
        self.email = email
        self.token_payload = token_payload or {}


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    supabase: SupabaseManager = Depends(get_supabase_manager),
    settings: Settings = Depends(get_settings),
) -> CurrentUser:
    """
    Resolve the current user from the Authorization bearer token.

    The token is handed to Supabase Auth (``auth.get_user``); nothing about
    identity is decided locally.

    Raises:
        AuthenticationError: If the token is missing, rejected or unreadable.
            The error details carry the login URL.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required", login_url=settings.LOGIN_URL)

    try:
        response = await run_in_threadpool(
            supabase.get_auth_client().get_user, credentials.credentials
        )
    except Exception as e:
        logger.warning(f"Supabase rejected session token: {e}")
        raise AuthenticationError(
            "Invalid or expired session", login_url=settings.LOGIN_URL
        ) from e

    user = getattr(response, "user", None)
    if user is None:
        raise AuthenticationError("Invalid or expired session", login_url=settings.LOGIN_URL)

    try:
        user_id = UUID(str(user.id))
    except ValueError as e:
        raise AuthenticationError("Invalid user identity", login_url=settings.LOGIN_URL) from e

    bind_user_id(str(user_id))
    logger.debug(f"Current user resolved: {user_id}")
    return CurrentUser(
        user_id=user_id,
        email=getattr(user, "email", None),
        token_payload={"aud": getattr(user, "aud", None)},
    )
