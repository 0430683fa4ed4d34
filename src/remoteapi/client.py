"""
ApiClient - base class of service clients

Every remote call goes through one dispatch point that posts the request,
applies an interpreter to the response body and normalizes failures:
server-reported RemoteApiErrors pass through unchanged, anything else becomes
RemoteApiError(ILLEGAL_RESPONSE).

Concrete service clients subclass ApiClient and implement each endpoint as a
one-line call to one of the call shapes below:

    class CameraClient(ApiClient):
        async def get_shoot_mode(self) -> Capability:
            return await self._capability_by_method("getAvailableShootMode", str)

        async def start_rec_mode(self) -> None:
            await self._no_value_by_method("startRecMode")
"""

import logging
from typing import Any, Callable, List, Optional, Type, TypeVar, Union

from remoteapi.config import ClientConfig
from remoteapi.core import interpreters
from remoteapi.core.errors import RemoteApiError, StatusCode
from remoteapi.core.models import ApiVersion, CallResult, Capability, Endpoint, MethodType
from remoteapi.core.request import MethodDescriptor
from remoteapi.transport import Transport, create_transport

logger = logging.getLogger(__name__)

T = TypeVar("T")

# raw body -> CallResult (or a plain value, treated as success)
Deserializer = Callable[[str], Any]


class ApiClient:
    """
    Base of service clients.

    Args:
        endpoint: Endpoint URL of the service
        transport: Transport used to post requests (built from config if omitted)
        config: Client configuration
    """

    def __init__(
        self,
        endpoint: Union[Endpoint, str],
        transport: Optional[Transport] = None,
        config: Optional[ClientConfig] = None
    ):
        if endpoint is None:
            raise ValueError("endpoint is required")
        self._endpoint = endpoint if isinstance(endpoint, Endpoint) else Endpoint(endpoint)
        self.config = config or ClientConfig()
        self.transport = transport or create_transport(self.config)

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    # Passthroughs

    async def get_method_types(self, version: str = "") -> List[MethodType]:
        """
        getMethodTypes v1.0

        Args:
            version: Version of the API set to retrieve. Empty string means all.
        """
        return await self._single(
            MethodDescriptor("getMethodTypes", params=[version]).to_request(),
            interpreters.method_types()
        )

    async def get_versions(self) -> List[str]:
        """getVersions v1.0"""
        return await self._primitive_list_by_method("getVersions", str)

    async def call(
        self,
        method: str,
        params: Any = None,
        version: Optional[ApiVersion] = None
    ) -> Any:
        """Call any method and return its raw result payload"""
        return await self._single(
            MethodDescriptor(method, version or self.config.default_version, params).to_request(),
            interpreters.object_of(Any)
        )

    # Call shapes with caller-built request bodies

    async def _single(self, request: str, deserializer: Deserializer) -> Any:
        """For APIs whose response is a single value"""
        return await self._execute(request, deserializer)

    async def _list(self, request: str, deserializer: Deserializer) -> List[Any]:
        """For APIs whose response is an array of a single type"""
        return await self._execute(request, deserializer)

    async def _capability(self, request: str, deserializer: Deserializer) -> Capability:
        """For APIs whose response is [current, [candidate0, candidate1, ...]]"""
        return await self._execute(request, deserializer)

    async def _no_value(self, request: str) -> None:
        """For APIs which have no response parameter"""
        await self._execute(request, interpreters.success_only())

    # Call shapes for APIs without request parameters

    async def _primitive_by_method(
        self, method: str, target: Type[T] = Any, version: ApiVersion = ApiVersion.V1_0
    ) -> T:
        return await self._single(
            MethodDescriptor(method, version).to_request(),
            interpreters.primitive(target)
        )

    async def _primitive_list_by_method(
        self, method: str, target: Type[T] = Any, version: ApiVersion = ApiVersion.V1_0
    ) -> List[T]:
        return await self._list(
            MethodDescriptor(method, version).to_request(),
            interpreters.primitive_list(target)
        )

    async def _object_by_method(
        self, method: str, target: Type[T] = Any, version: ApiVersion = ApiVersion.V1_0
    ) -> T:
        return await self._single(
            MethodDescriptor(method, version).to_request(),
            interpreters.object_of(target)
        )

    async def _object_list_by_method(
        self, method: str, target: Type[T] = Any, version: ApiVersion = ApiVersion.V1_0
    ) -> List[T]:
        return await self._list(
            MethodDescriptor(method, version).to_request(),
            interpreters.object_list(target)
        )

    async def _capability_by_method(
        self, method: str, target: Type[T] = Any, version: ApiVersion = ApiVersion.V1_0
    ) -> Capability:
        return await self._capability(
            MethodDescriptor(method, version).to_request(),
            interpreters.capability(target)
        )

    async def _no_value_by_method(
        self, method: str, version: ApiVersion = ApiVersion.V1_0
    ) -> None:
        await self._no_value(MethodDescriptor(method, version).to_request())

    # Dispatch core

    async def _execute(self, request: str, deserializer: Deserializer) -> Any:
        """Dispatch and return the value, raising RemoteApiError on failure"""
        return (await self._dispatch(request, deserializer)).unwrap()

    async def _dispatch(self, request: str, deserializer: Deserializer) -> CallResult:
        """Post one request and classify the outcome"""
        logger.debug(f"POST {self._endpoint}: {request}")
        try:
            body = await self.transport.post(self._endpoint, request)
            outcome = deserializer(body)
        except Exception as e:
            outcome = CallResult.failure(e)

        if not isinstance(outcome, CallResult):
            return CallResult.success(outcome)
        if outcome.ok:
            return outcome

        error = outcome.error
        if isinstance(error, RemoteApiError):
            logger.info(f"Server reported {error.status.name} ({error.server_code}) for {request}")
            return outcome

        logger.warning(f"Illegal response from {self._endpoint}: {error!r}")
        return CallResult.failure(RemoteApiError(StatusCode.ILLEGAL_RESPONSE))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._endpoint.url!r})"
