# base_counter/domains/social_graph/client.py
"""
Neynar REST client.

Requests rotate through the configured API keys; a failed request is retried
once with each remaining key before giving up.
"""
import itertools
from typing import List, Optional

import httpx

from base_counter.core.config import settings
from base_counter.domains.social_graph.schemas import NeynarUser
from base_counter.shared.errors import ConfigurationError, UpstreamServiceError
from base_counter.shared.utils.logger import get_logger

logger = get_logger(__name__)


class NeynarClient:
    def __init__(
        self,
        api_keys: Optional[List[str]] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_keys = api_keys
        self.base_url = (base_url or settings.NEYNAR_API_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.NEYNAR_TIMEOUT_SECONDS
        self._transport = transport
        self._counter = itertools.count()

    @property
    def api_keys(self) -> List[str]:
        keys = self._api_keys if self._api_keys is not None else settings.neynar_rotation_keys
        if not keys:
            raise ConfigurationError(
                "NEYNAR_API_KEY is not set. Set NEYNAR_API_KEY or NEYNAR_API_KEY2..5."
            )
        return keys

    def _next_key(self, keys: List[str]) -> str:
        return keys[next(self._counter) % len(keys)]

    async def fetch_user(self, fid: int) -> Optional[NeynarUser]:
        """Bulk-user lookup for a single fid; None when Neynar has no such user."""
        keys = self.api_keys
        url = f"{self.base_url}/user/bulk/"
        last_error = None

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            for attempt in range(len(keys)):
                api_key = self._next_key(keys)
                try:
                    response = await client.get(
                        url, params={"fids": str(fid)}, headers={"x-api-key": api_key}
                    )
                    response.raise_for_status()
                    payload = response.json()
                except httpx.HTTPError as e:
                    last_error = e
                    logger.warning(
                        f"Neynar key attempt {attempt + 1}/{len(keys)} failed for FID {fid}: {e}"
                    )
                    continue

                users = payload.get("users") or []
                if not users:
                    logger.warning(f"User not found in Neynar API for FID: {fid}")
                    return None
                return NeynarUser.model_validate(users[0])

        raise UpstreamServiceError(f"All Neynar API keys failed: {last_error}")


neynar_client = NeynarClient()
