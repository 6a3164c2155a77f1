"""
HTTP client for the downstream resource service.
"""

import logging
from typing import Any, Optional

import httpx

from ..errors import DownstreamError


logger = logging.getLogger(__name__)


class DownstreamClient:
    """
    JSON-over-HTTP client for a resource service.

    Transport failures and unexpected statuses are raised as DownstreamError.
    """

    def __init__(
        self,
        base_url: str,
        timeout_ms: int = 2000,
        max_connections: int = 10,
        user_agent: str = "bff/1.0",
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Args:
            base_url: Base URL of the resource service (e.g. "http://authors-store:8080")
            timeout_ms: Request timeout in milliseconds
            max_connections: Connection pool size
            user_agent: User-Agent header sent downstream
            client: Preconfigured client, used instead of building one
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout_ms / 1000.0

        self.client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            headers={
                "Accept": "application/json",
                "User-Agent": user_agent
            },
            limits=httpx.Limits(
                max_keepalive_connections=max(1, max_connections // 2),
                max_connections=max_connections
            )
        )

    async def get_json(self, path: str) -> Any:
        """GET a path and return its decoded JSON body."""
        response = await self._request("GET", path)
        return self._decode(response)

    async def find_json(self, path: str) -> Optional[Any]:
        """GET a path, returning None when the resource service answers 404."""
        response = await self._request("GET", path, allow_not_found=True)
        if response.status_code == 404:
            return None
        return self._decode(response)

    async def post_json(self, path: str, payload: Any) -> Any:
        """POST a JSON body and return the decoded JSON answer."""
        response = await self._request("POST", path, json=payload)
        return self._decode(response)

    async def check_health(self) -> bool:
        """Whether the resource service answers at all."""
        try:
            response = await self.client.get(f"{self.base_url}/")
            return response.status_code < 500
        except httpx.HTTPError as e:
            logger.warning(f"Downstream health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        allow_not_found: bool = False,
        **kwargs
    ) -> httpx.Response:
        try:
            response = await self.client.request(method, f"{self.base_url}{path}", **kwargs)
        except httpx.HTTPError as e:
            logger.error(
                f"Downstream request failed: {method} {path}: {e}",
                extra={
                    "component": "downstream",
                    "method": method,
                    "path": path,
                    "error": str(e)
                }
            )
            raise DownstreamError(f"Resource service unavailable: {e}") from e

        if allow_not_found and response.status_code == 404:
            return response

        if response.is_error:
            logger.error(
                f"Downstream returned {response.status_code}: {method} {path}",
                extra={
                    "component": "downstream",
                    "method": method,
                    "path": path,
                    "status_code": response.status_code
                }
            )
            raise DownstreamError(
                f"Resource service returned {response.status_code} for {method} {path}"
            )

        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise DownstreamError(f"Resource service returned invalid JSON: {e}") from e
