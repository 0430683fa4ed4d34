"""
HTTP transport built on httpx
"""

import logging
from typing import Optional

import httpx

from remoteapi.config import ClientConfig
from remoteapi.core.models import Endpoint
from remoteapi.transport.base import TransportError

logger = logging.getLogger(__name__)


class HttpxTransport:
    """
    Posts JSON request bodies with a fresh httpx.AsyncClient per call.

    Args:
        config: Client configuration (timeout, extra headers)
        http_transport: Optional httpx transport, e.g. httpx.MockTransport in tests
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.config = config or ClientConfig()
        self._http_transport = http_transport

    async def post(self, endpoint: Endpoint, body: str) -> str:
        headers = {"Content-Type": "application/json", **self.config.headers}
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout),
                transport=self._http_transport
            ) as client:
                response = await client.post(str(endpoint), content=body, headers=headers)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"HTTP {e.response.status_code} from {endpoint}",
                status_code=e.response.status_code
            ) from e
        except httpx.HTTPError as e:
            logger.debug(f"Request to {endpoint} failed: {e!r}")
            raise TransportError(f"Request to {endpoint} failed: {e}") from e
