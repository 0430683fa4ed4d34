"""
Global pytest configuration and fixtures for remoteapi tests
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Union

import pytest

# Add the src directory to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / 'src'))

from remoteapi.core.models import Endpoint
from remoteapi.transport.base import TransportError

# Configure logging for tests
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Suppress noisy logs during testing
logging.getLogger('httpx').setLevel(logging.WARNING)
logging.getLogger('aiohttp').setLevel(logging.WARNING)

ENDPOINT_URL = "http://192.168.122.1:8080/sony/camera"


class FakeTransport:
    """
    Transport that replays canned response bodies.

    Each entry is either a response body (dict is JSON encoded) or an
    exception to raise. The last entry is reused once the queue runs out.
    """

    def __init__(self, *responses: Union[str, dict, Exception]):
        self.responses = list(responses)
        self.requests: List[dict] = []
        self.endpoints: List[Endpoint] = []

    async def post(self, endpoint: Endpoint, body: str) -> str:
        self.endpoints.append(endpoint)
        self.requests.append(json.loads(body))
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        if isinstance(response, dict):
            return json.dumps(response)
        return response

    @property
    def last_request(self) -> Optional[dict]:
        return self.requests[-1] if self.requests else None


@pytest.fixture
def endpoint_url() -> str:
    return ENDPOINT_URL


@pytest.fixture
def fake_transport_factory():
    """Build a FakeTransport from canned responses"""
    return FakeTransport


@pytest.fixture
def network_error() -> Exception:
    return TransportError("Connection refused")
