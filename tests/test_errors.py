"""
Tests for status codes, RemoteApiError and CallResult
"""

import pytest

from remoteapi.core.errors import RemoteApiError, StatusCode
from remoteapi.core.models import CallResult, Capability, MethodType


def test_known_server_code():
    error = RemoteApiError.from_server(40403, "Still Capturing Not Finished")

    assert error.status == StatusCode.STILL_CAPTURING_NOT_FINISHED
    assert error.server_code == 40403
    assert "STILL_CAPTURING_NOT_FINISHED" in str(error)


def test_unknown_server_code():
    error = RemoteApiError.from_server(500, "Unknown")

    assert error.status == StatusCode.ANY
    assert error.server_code == 500


def test_default_message():
    error = RemoteApiError(StatusCode.ILLEGAL_RESPONSE)

    assert error.message == "illegal response"
    assert error.to_dict() == {"status": "ILLEGAL_RESPONSE", "code": 6, "message": "illegal response"}


def test_call_result():
    ok = CallResult.success([1, 2])
    failed = CallResult.failure(RemoteApiError(StatusCode.TIMEOUT))

    assert ok.ok and ok.unwrap() == [1, 2]
    assert not failed.ok
    with pytest.raises(RemoteApiError):
        failed.unwrap()


def test_falsy_success_value():
    assert CallResult.success(None).ok
    assert CallResult.success(False).unwrap() is False


def test_capability_defaults():
    capability = Capability(current="still")

    assert capability.candidates == []
    assert not capability.adjustable


def test_method_type_arity():
    method = MethodType(name="actZoom", parameter_types=["string", "string"], result_types=["int"], version="1.0")

    assert method.parameter_count == 2
    assert method.result_count == 1
