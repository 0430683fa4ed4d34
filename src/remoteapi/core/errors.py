"""
Error types for the remote API client

Every public call either resolves with a typed value or fails with a
RemoteApiError carrying one StatusCode.
"""

from enum import IntEnum
from typing import Any, Dict, Optional


class StatusCode(IntEnum):
    """Status codes reported by the server or assigned by the client"""

    # Generic codes (0-15)
    OK = 0
    ANY = 1
    TIMEOUT = 2
    ILLEGAL_ARGUMENT = 3
    ILLEGAL_DATA_FORMAT = 4
    ILLEGAL_REQUEST = 5
    ILLEGAL_RESPONSE = 6
    ILLEGAL_STATE = 7
    ILLEGAL_TYPE = 8
    INDEX_OUT_OF_BOUNDS = 9
    NO_SUCH_ELEMENT = 10
    NO_SUCH_FIELD = 11
    NO_SUCH_METHOD = 12
    NULL_POINTER = 13
    UNSUPPORTED_VERSION = 14
    UNSUPPORTED_OPERATION = 15

    # Device codes (40400+)
    SHOOTING_FAIL = 40400
    CAMERA_NOT_READY = 40401
    ALREADY_RUNNING_POLLING_API = 40402
    STILL_CAPTURING_NOT_FINISHED = 40403

    @classmethod
    def from_server(cls, code: int) -> "StatusCode":
        """Map a server-reported code, falling back to ANY for unknown values"""
        try:
            return cls(code)
        except ValueError:
            return cls.ANY


class RemoteApiError(Exception):
    """
    The single error type surfaced by the client.

    Args:
        status: Normalized status code
        message: Optional human readable reason
        server_code: Raw code reported by the server (defaults to status)
    """

    def __init__(
        self,
        status: StatusCode,
        message: Optional[str] = None,
        server_code: Optional[int] = None
    ):
        self.status = StatusCode(status)
        self.server_code = int(self.status) if server_code is None else server_code
        self.message = message or self.status.name.replace("_", " ").lower()
        super().__init__(f"[{self.status.name}] {self.message}")

    @classmethod
    def from_server(cls, code: int, message: Optional[str] = None) -> "RemoteApiError":
        return cls(StatusCode.from_server(code), message, server_code=code)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.name,
            "code": self.server_code,
            "message": self.message,
        }


class ResponseFormatError(ValueError):
    """Raised when a response body does not have the expected shape"""
    pass
