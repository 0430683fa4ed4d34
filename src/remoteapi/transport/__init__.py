"""
Transports for the remote API client
"""

from typing import Optional

from remoteapi.config import ClientConfig
from remoteapi.transport.base import Transport, TransportError
from remoteapi.transport.httpx_transport import HttpxTransport
from remoteapi.transport.aiohttp_transport import AiohttpTransport


def create_transport(config: Optional[ClientConfig] = None) -> Transport:
    """Create the transport named by config.transport"""
    config = config or ClientConfig()
    if config.transport == "aiohttp":
        return AiohttpTransport(config)
    return HttpxTransport(config)


__all__ = [
    "Transport",
    "TransportError",
    "HttpxTransport",
    "AiohttpTransport",
    "create_transport",
]
