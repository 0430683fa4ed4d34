"""
Transport contract: post a request body to an endpoint, return the response body
"""

from typing import Optional, Protocol, runtime_checkable

from remoteapi.core.models import Endpoint


class TransportError(Exception):
    """Network or HTTP level failure (connection refused, timeout, non-2xx)"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@runtime_checkable
class Transport(Protocol):
    """Sends one request body and returns the raw response body"""

    async def post(self, endpoint: Endpoint, body: str) -> str:
        ...
