"""
Core data models for the remote API client

Endpoint addresses, API versions, capability and method-type payloads, and the
explicit success-or-error result passed between interpreters and the dispatcher.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ApiVersion(str, Enum):
    V1_0 = "1.0"
    V1_1 = "1.1"
    V1_2 = "1.2"
    V1_3 = "1.3"
    V1_4 = "1.4"


@dataclass(frozen=True)
class Endpoint:
    """Immutable address of one remote service instance"""
    url: str

    def __post_init__(self):
        if not self.url:
            raise ValueError("Endpoint URL is required")
        parsed = urlparse(self.url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Endpoint URL must be an absolute http(s) URL: {self.url!r}")

    def __str__(self) -> str:
        return self.url


class Capability(BaseModel, Generic[T]):
    """
    Server-reported current value plus the candidates it can be set to.

    An empty candidate list means the property is not adjustable right now.
    """
    model_config = ConfigDict(frozen=True)

    current: T
    candidates: List[T] = Field(default_factory=list)

    @property
    def adjustable(self) -> bool:
        return len(self.candidates) > 0


class MethodType(BaseModel):
    """One API method as described by the server"""
    model_config = ConfigDict(frozen=True)

    name: str
    parameter_types: List[str] = Field(default_factory=list)
    result_types: List[str] = Field(default_factory=list)
    version: str

    @property
    def parameter_count(self) -> int:
        return len(self.parameter_types)

    @property
    def result_count(self) -> int:
        return len(self.result_types)


@dataclass(frozen=True)
class CallResult(Generic[T]):
    """Either a value or the exception that prevented producing one"""
    value: Optional[T] = None
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, value: Any) -> "CallResult[Any]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "CallResult[Any]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value
