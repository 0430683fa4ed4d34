"""
Response interpreters

Each interpreter turns a raw response body into a CallResult. The set of
variants is closed (see InterpreterKind); element types are checked with
pydantic TypeAdapters built once per interpreter.

Response envelope:
    {"result": <payload>, "id": 1}
    {"error": [<code>, "<message>"], "id": 1}
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Type, Union

from pydantic import TypeAdapter

from remoteapi.core.errors import RemoteApiError, ResponseFormatError
from remoteapi.core.models import CallResult, Capability, MethodType

_SCALARS = (str, int, float, bool)


class InterpreterKind(str, Enum):
    PRIMITIVE = "primitive"
    PRIMITIVE_LIST = "primitive_list"
    OBJECT = "object"
    OBJECT_LIST = "object_list"
    CAPABILITY = "capability"
    SUCCESS_ONLY = "success_only"
    METHOD_TYPES = "method_types"


def parse_envelope(raw: Union[str, bytes]) -> Dict[str, Any]:
    """Decode a response body; the top level must be a JSON object"""
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    envelope = json.loads(raw)
    if not isinstance(envelope, dict):
        raise ResponseFormatError(f"Response is not a JSON object: {type(envelope).__name__}")
    return envelope


def _is_code(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def server_error(envelope: Dict[str, Any]) -> Optional[RemoteApiError]:
    """
    Return the error reported in the envelope, if any.

    Accepts [code] / [code, message] and {"code": ..., "message": ...}. A
    null error field counts as absent. Any other shape is malformed.
    """
    error = envelope.get("error")
    if error is None:
        return None

    if isinstance(error, list) and 1 <= len(error) <= 2 and _is_code(error[0]):
        message = error[1] if len(error) == 2 else None
        if message is None or isinstance(message, str):
            return RemoteApiError.from_server(error[0], message)
    elif isinstance(error, dict) and _is_code(error.get("code")):
        message = error.get("message")
        if message is None or isinstance(message, str):
            return RemoteApiError.from_server(error["code"], message)

    raise ResponseFormatError(f"Malformed error envelope: {error!r}")


def _result(envelope: Dict[str, Any], key: str = "result") -> Any:
    if key not in envelope:
        raise ResponseFormatError(f"Response has no '{key}' field")
    return envelope[key]


def _scalar(value: Any, adapter: TypeAdapter) -> Any:
    if value is None or not isinstance(value, _SCALARS):
        raise ResponseFormatError(f"Expected a primitive value, got {type(value).__name__}")
    # JSON-mode strictness: enum targets accept their raw values, "30" is still not an int
    return adapter.validate_json(json.dumps(value), strict=True)


def _sequence(value: Any) -> List[Any]:
    if not isinstance(value, list):
        raise ResponseFormatError(f"Expected an array, got {type(value).__name__}")
    return value


def _as_primitive(envelope, adapter):
    return _scalar(_result(envelope), adapter)


def _as_primitive_list(envelope, adapter):
    return [_scalar(item, adapter) for item in _sequence(_result(envelope))]


def _as_object(envelope, adapter):
    return adapter.validate_python(_result(envelope))


def _as_object_list(envelope, adapter):
    return [adapter.validate_python(item) for item in _sequence(_result(envelope))]


def _as_capability(envelope, adapter):
    result = _sequence(_result(envelope))
    if len(result) != 2:
        raise ResponseFormatError(f"Capability must have 2 elements, got {len(result)}")
    current, candidates = result
    return Capability(
        current=_scalar(current, adapter),
        candidates=[_scalar(item, adapter) for item in _sequence(candidates)],
    )


def _as_success(envelope, adapter):
    return True


def _as_method_types(envelope, adapter):
    key = "results" if "results" in envelope else "result"
    method_types = []
    for row in _sequence(_result(envelope, key)):
        if not isinstance(row, list) or len(row) != 4:
            raise ResponseFormatError(f"Malformed method type entry: {row!r}")
        name, parameter_types, result_types, version = row
        method_types.append(MethodType(
            name=name,
            parameter_types=_sequence(parameter_types),
            result_types=_sequence(result_types),
            version=version,
        ))
    return method_types


_EXTRACTORS: Dict[InterpreterKind, Callable[[Dict[str, Any], Optional[TypeAdapter]], Any]] = {
    InterpreterKind.PRIMITIVE: _as_primitive,
    InterpreterKind.PRIMITIVE_LIST: _as_primitive_list,
    InterpreterKind.OBJECT: _as_object,
    InterpreterKind.OBJECT_LIST: _as_object_list,
    InterpreterKind.CAPABILITY: _as_capability,
    InterpreterKind.SUCCESS_ONLY: _as_success,
    InterpreterKind.METHOD_TYPES: _as_method_types,
}


@dataclass(frozen=True)
class Interpreter:
    """A stateless raw-body -> CallResult function of one fixed kind"""
    kind: InterpreterKind
    target: Any = None
    _adapter: Optional[TypeAdapter] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.target is not None:
            object.__setattr__(self, "_adapter", TypeAdapter(self.target))

    def __call__(self, raw: Union[str, bytes]) -> CallResult:
        try:
            envelope = parse_envelope(raw)
            error = server_error(envelope)
            if error is not None:
                return CallResult.failure(error)
            return CallResult.success(_EXTRACTORS[self.kind](envelope, self._adapter))
        except Exception as e:
            return CallResult.failure(e)


def primitive(target: Type = Any) -> Interpreter:
    return Interpreter(InterpreterKind.PRIMITIVE, target)


def primitive_list(target: Type = Any) -> Interpreter:
    return Interpreter(InterpreterKind.PRIMITIVE_LIST, target)


def object_of(target: Type = Any) -> Interpreter:
    return Interpreter(InterpreterKind.OBJECT, target)


def object_list(target: Type = Any) -> Interpreter:
    return Interpreter(InterpreterKind.OBJECT_LIST, target)


def capability(target: Type = Any) -> Interpreter:
    return Interpreter(InterpreterKind.CAPABILITY, target)


def success_only() -> Interpreter:
    return Interpreter(InterpreterKind.SUCCESS_ONLY)


def method_types() -> Interpreter:
    return Interpreter(InterpreterKind.METHOD_TYPES)
