# 📄 File: garden_tracker/shared/config/supabase.py
#
# 🧭 Purpose (Layman Explanation):
# Connects the Garden Tracker to Supabase, the hosted service that handles
# user logins, so we can check who is making each request.
#
# 🧪 Purpose (Technical Summary):
# Lazily constructed Supabase client (supabase-py) configured for server-side
# token verification, exposed through a cached manager.
#
# 🔗 Dependencies:
# - supabase (create_client, ClientOptions)
# - garden_tracker.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - garden_tracker.shared.core.dependencies (session gate)
# - garden_tracker.main (shutdown cleanup)

import logging
from functools import lru_cache
from typing import Optional

from supabase import Client, ClientOptions, create_client

from .settings import get_settings

logger = logging.getLogger(__name__)


class SupabaseManager:
    """
    Supabase client manager.

    The client is created on first use so the app can start (and tests can
    run) without reaching Supabase.
    """

    def __init__(self):
        self._client: Optional[Client] = None
        self.settings = get_settings()

    @property
    def client(self) -> Client:
        """Get or create Supabase client with lazy initialization."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self) -> Client:
        """Create Supabase client with server-side options."""
        try:
            # Tokens are verified per request; the server never keeps a session
            client_options = ClientOptions(
                schema="public",
                headers={
                    "User-Agent": f"GardenTracker/{self.settings.APP_VERSION}",
                },
                auto_refresh_token=False,
                persist_session=False,
            )

            client = create_client(
                supabase_url=self.settings.SUPABASE_URL,
                supabase_key=self.settings.SUPABASE_ANON_KEY,
                options=client_options
            )

            logger.info("Supabase client initialized successfully")
            return client

        except Exception as e:
            logger.error(f"Failed to initialize Supabase client: {e}")
            raise ConnectionError(f"Supabase initialization failed: {e}") from e

    def get_auth_client(self):
        """Get Supabase auth client for token verification."""
        return self.client.auth

    def close(self):
        """Drop the cached client."""
        if self._client:
            self._client = None
            logger.info("Supabase client released")


@lru_cache()
def get_supabase_manager() -> SupabaseManager:
    """
    Get cached Supabase manager instance.

    Returns:
        SupabaseManager: Shared Supabase manager
    """
    return SupabaseManager()


async def cleanup_supabase():
    """Cleanup Supabase client on application shutdown."""
    get_supabase_manager().close()
