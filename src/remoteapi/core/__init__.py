"""
Core types of the remote API client: errors, models, interpreters, requests
"""

from remoteapi.core.errors import RemoteApiError, ResponseFormatError, StatusCode
from remoteapi.core.models import ApiVersion, CallResult, Capability, Endpoint, MethodType
from remoteapi.core.request import MethodDescriptor, build_request
from remoteapi.core.interpreters import Interpreter, InterpreterKind

__all__ = [
    "RemoteApiError",
    "ResponseFormatError",
    "StatusCode",
    "ApiVersion",
    "CallResult",
    "Capability",
    "Endpoint",
    "MethodType",
    "MethodDescriptor",
    "build_request",
    "Interpreter",
    "InterpreterKind",
]
