"""remoteapi - typed async dispatch layer for JSON-RPC style remote APIs"""

__version__ = "0.1.0"

from remoteapi.core import (
    ApiVersion,
    CallResult,
    Capability,
    Endpoint,
    MethodDescriptor,
    MethodType,
    RemoteApiError,
    StatusCode,
    build_request,
)
from remoteapi.config import ClientConfig, load_config
from remoteapi.transport import Transport, TransportError
from remoteapi.client import ApiClient

__all__ = [
    "ApiClient",
    "ApiVersion",
    "CallResult",
    "Capability",
    "ClientConfig",
    "Endpoint",
    "MethodDescriptor",
    "MethodType",
    "RemoteApiError",
    "StatusCode",
    "Transport",
    "TransportError",
    "build_request",
    "load_config",
]
