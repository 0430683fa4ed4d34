"""
Request body construction

Builds the JSON envelope {"method", "params", "id", "version"} sent to the server.
"""

import itertools
import json
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from remoteapi.core.models import ApiVersion

_request_ids = itertools.count(1)


def _normalize_params(params: Any) -> List[Any]:
    if params is None:
        return []
    if isinstance(params, (list, tuple)):
        return list(params)
    return [params]


def build_request(
    method: str,
    version: Union[ApiVersion, str] = ApiVersion.V1_0,
    params: Any = None,
    request_id: Optional[int] = None
) -> str:
    """
    Serialize one request body.

    Args:
        method: Name of the API
        version: Version of the API
        params: Parameter list; a single non-list value is wrapped in a list
        request_id: Explicit id, otherwise the next value of a process-wide counter

    Returns:
        JSON text of the request
    """
    if not method:
        raise ValueError("Method name is required")
    if request_id is None:
        request_id = next(_request_ids)
    return json.dumps({
        "method": method,
        "params": _normalize_params(params),
        "id": request_id,
        "version": ApiVersion(version).value,
    })


@dataclass(frozen=True)
class MethodDescriptor:
    """(name, version, params) identifying one remote call"""
    name: str
    version: ApiVersion = ApiVersion.V1_0
    params: Any = None

    def to_request(self, request_id: Optional[int] = None) -> str:
        return build_request(self.name, self.version, self.params, request_id)
