# base_counter/domains/ipfs/service.py
"""
Image pinning through Pinata.

Credential pairs are used round-robin across requests. When an upload fails
the next pair is tried, each pair at most once per upload.
"""
import itertools
import json
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

import httpx

from base_counter.core.config import settings
from base_counter.shared.errors import ConfigurationError, UpstreamServiceError
from base_counter.shared.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class PinResult:
    cid: str
    ipfs_url: str


class IpfsUploader:
    def __init__(
        self,
        credentials: Optional[List[Tuple[str, str]]] = None,
        api_url: Optional[str] = None,
        gateway: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._credentials = credentials
        self.api_url = (api_url or settings.PINATA_API_URL).rstrip("/")
        self.gateway = gateway or settings.PINATA_GATEWAY
        self._transport = transport
        self._counter = itertools.count()

    @property
    def credentials(self) -> List[Tuple[str, str]]:
        credentials = self._credentials if self._credentials is not None else settings.pinata_credentials
        if not credentials:
            raise ConfigurationError(
                "At least one set of PINATA_API_KEY and PINATA_SECRET_API_KEY must be set"
            )
        return credentials

    def gateway_url(self, cid: str) -> str:
        return f"https://{self.gateway}/ipfs/{cid}"

    async def _pin(
        self,
        client: httpx.AsyncClient,
        credential: Tuple[str, str],
        content: bytes,
        filename: str,
        content_type: str,
    ) -> str:
        api_key, secret_key = credential
        response = await client.post(
            f"{self.api_url}/pinning/pinFileToIPFS",
            headers={"pinata_api_key": api_key, "pinata_secret_api_key": secret_key},
            files={"file": (filename, content, content_type)},
            data={"pinataMetadata": json.dumps({"name": filename})},
        )
        response.raise_for_status()
        cid = response.json().get("IpfsHash")
        if not cid:
            raise UpstreamServiceError("Pinata response did not include IpfsHash")
        return cid

    async def upload_image(
        self,
        content: bytes,
        filename: Optional[str] = None,
        content_type: str = "image/png",
    ) -> PinResult:
        credentials = self.credentials
        name = filename or f"counter-share-{int(time.time() * 1000)}.png"
        last_error: Optional[Exception] = None

        async with httpx.AsyncClient(
            timeout=settings.PINATA_TIMEOUT_SECONDS, transport=self._transport
        ) as client:
            for attempt in range(len(credentials)):
                credential = credentials[next(self._counter) % len(credentials)]
                try:
                    cid = await self._pin(client, credential, content, name, content_type)
                except (httpx.HTTPError, UpstreamServiceError, ValueError) as e:
                    last_error = e
                    logger.warning(
                        f"Pinata key attempt {attempt + 1}/{len(credentials)} failed, trying next key: {e}"
                    )
                    continue
                logger.info(f"Pinned {name} to IPFS as {cid}")
                return PinResult(cid=cid, ipfs_url=self.gateway_url(cid))

        raise UpstreamServiceError(str(last_error) if last_error else "All Pinata API keys failed")


ipfs_uploader = IpfsUploader()
