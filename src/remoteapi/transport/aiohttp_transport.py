"""
HTTP transport built on aiohttp
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from remoteapi.config import ClientConfig
from remoteapi.core.models import Endpoint
from remoteapi.transport.base import TransportError

logger = logging.getLogger(__name__)


class AiohttpTransport:
    """Posts JSON request bodies with a fresh aiohttp.ClientSession per call"""

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()

    async def post(self, endpoint: Endpoint, body: str) -> str:
        headers = {"Content-Type": "application/json", **self.config.headers}
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    str(endpoint),
                    data=body.encode("utf-8"),
                    headers=headers,
                    timeout=aiohttp.ClientTimeout(total=self.config.timeout)
                ) as resp:
                    if resp.status >= 300:
                        raise TransportError(
                            f"HTTP {resp.status} from {endpoint}",
                            status_code=resp.status
                        )
                    return await resp.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug(f"Request to {endpoint} failed: {e!r}")
            raise TransportError(f"Request to {endpoint} failed: {e}") from e
