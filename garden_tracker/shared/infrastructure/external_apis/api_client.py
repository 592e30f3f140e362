# 📄 File: garden_tracker/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# A careful messenger for talking to outside web services: it sends the request,
# waits a limited time, and turns any failure into a clear error for the app.

# 🧪 Purpose (Technical Summary):
# Generic async HTTP JSON client on aiohttp with a total timeout, status-to-exception
# mapping, request timing logs and basic counters. No retries: callers surface
# failures to the user, who may try again.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client
# - garden_tracker.shared.core.exceptions
# - garden_tracker.shared.utils.logging (external API call logging)

# 🔄 Connected Modules / Calls From:
# Used by: plant_catalog.infrastructure.external.perenual_client

import asyncio
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import ClientSession, ClientTimeout

from garden_tracker.shared.core.exceptions import (
    APITimeoutError,
    ExternalAPIError,
    NotFoundError,
)
from garden_tracker.shared.utils.logging import get_logger

logger = get_logger(__name__)

# Query parameters that must never reach the logs
SENSITIVE_PARAMS = {"key", "api_key", "token"}


class APIClient:
    """
    Generic async HTTP client for external API integrations.

    Features:
    - One pooled aiohttp session per client, created on first use
    - Total request timeout
    - Non-2xx statuses and network failures mapped to ExternalAPIError
    - Request timing logged through the performance logger
    """

    def __init__(
        self,
        base_url: str,
        api_name: str,
        timeout: int = 15,
        default_params: Optional[Dict[str, Any]] = None,
        session: Optional[ClientSession] = None
    ):
        """Initialize API client with configuration."""
        self.base_url = base_url.rstrip("/")
        self.api_name = api_name
        self.timeout = timeout
        self.default_params = default_params or {}
        self.session: Optional[ClientSession] = session
        # A session handed in by the caller stays the caller's to close
        self._owns_session = session is None

        self.stats = {
            "total_requests": 0,
            "successful_requests": 0,
            "failed_requests": 0,
            "last_request_time": None,
        }

    async def initialize(self):
        """Create the aiohttp session."""
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            headers=self._get_default_headers(),
        )
        self._owns_session = True
        logger.info(f"API client initialized for {self.api_name}")

    def _get_default_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": f"GardenTracker/1.0 ({self.api_name}-client)",
            "Accept": "application/json",
        }

    def _build_url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    @staticmethod
    def _loggable_params(params: Dict[str, Any]) -> Dict[str, Any]:
        return {k: ("***" if k in SENSITIVE_PARAMS else v) for k, v in params.items()}

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Send one request and return the decoded JSON body."""
        if self.session is None:
            await self.initialize()

        url = self._build_url(endpoint)
        request_params = {**self.default_params, **(params or {})}

        self.stats["total_requests"] += 1
        self.stats["last_request_time"] = datetime.now(timezone.utc).isoformat()
        start_time = time.perf_counter()
        status_code: Optional[int] = None

        try:
            async with self.session.request(method, url, params=request_params) as response:
                status_code = response.status
                await self._handle_response_status(response, endpoint)
                try:
                    payload = await response.json(content_type=None)
                except (ValueError, aiohttp.ContentTypeError) as e:
                    raise ExternalAPIError(
                        f"{self.api_name} returned a response that is not valid JSON",
                        api_name=self.api_name,
                        api_status_code=status_code,
                    ) from e

        except asyncio.TimeoutError as e:
            self._record_failure(method, endpoint, status_code, start_time, e)
            raise APITimeoutError(self.api_name, self.timeout) from e
        except aiohttp.ClientError as e:
            self._record_failure(method, endpoint, status_code, start_time, e)
            raise ExternalAPIError(
                f"Could not reach {self.api_name}: {e}",
                api_name=self.api_name,
            ) from e
        except (ExternalAPIError, NotFoundError) as e:
            self._record_failure(method, endpoint, status_code, start_time, e)
            raise

        self.stats["successful_requests"] += 1
        logger.performance.log_external_api_call(
            api_name=self.api_name,
            endpoint=endpoint,
            method=method,
            status_code=status_code,
            duration_ms=(time.perf_counter() - start_time) * 1000,
            success=True,
            extra={"params": self._loggable_params(params or {})},
        )
        return payload

    async def _handle_response_status(self, response: aiohttp.ClientResponse, endpoint: str):
        """Map HTTP error statuses to application exceptions."""
        if 200 <= response.status < 300:
            return

        response_text = (await response.text())[:500]

        if response.status == 404:
            raise NotFoundError(
                f"{self.api_name} has no resource at {endpoint}",
                resource_type=f"{self.api_name.lower()}_resource",
                resource_id=endpoint,
            )
        if response.status in (401, 403):
            raise ExternalAPIError(
                f"{self.api_name} rejected the API key ({response.status})",
                api_name=self.api_name,
                api_status_code=response.status,
                retryable=False,
            )
        raise ExternalAPIError(
            f"{self.api_name} request failed with status {response.status}",
            api_name=self.api_name,
            api_status_code=response.status,
            api_response=response_text or None,
        )

    def _record_failure(self, method, endpoint, status_code, start_time, error: Exception):
        self.stats["failed_requests"] += 1
        logger.performance.log_external_api_call(
            api_name=self.api_name,
            endpoint=endpoint,
            method=method,
            status_code=status_code,
            duration_ms=(time.perf_counter() - start_time) * 1000,
            success=False,
            extra={"error_type": type(error).__name__, "error": str(error)},
        )

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Make GET request."""
        return await self._make_request("GET", endpoint, params)

    def get_stats(self) -> Dict[str, Any]:
        """Get client counters."""
        return {
            **self.stats,
            "api_name": self.api_name,
            "error_rate": (
                self.stats["failed_requests"] / max(self.stats["total_requests"], 1)
            ) * 100,
        }

    async def close(self):
        """Close the client session if this client created it."""
        if self.session and self._owns_session:
            await self.session.close()
        self.session = None
        logger.info(f"API client closed for {self.api_name}")
