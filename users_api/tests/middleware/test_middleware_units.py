"""
Tests for the individual middlewares, run inside a bare Quart request context.
"""

from functools import partial

import pytest
from quart import Quart, Response, request
from structlog.testing import capture_logs

from users_api.middleware import authentication, error_handling, extract_token, request_logging


@pytest.fixture
def bare_app():
    return Quart(__name__)


def calls_counter():
    calls = []

    async def handler(request_):
        calls.append(request_.path)
        return Response("ok", status=200)

    return handler, calls


@pytest.mark.parametrize("header,token", [
    (None, None),
    ("", None),
    ("Bearer valid_token", "valid_token"),
    ("valid_token", "valid_token"),
    ("Token a b c", "c"),
    ("Bearer ", None),
])
def test_extract_token(header, token):
    assert extract_token(header) == token


@pytest.mark.asyncio
async def test_authentication_rejects_missing_header(bare_app):
    handler, calls = calls_counter()
    guarded = authentication(handler, expected_token="valid_token")

    async with bare_app.test_request_context("/users", method="DELETE"):
        response = await guarded(request)

    assert response.status_code == 401
    assert await response.get_json() == {"error": "Unauthorized"}
    assert calls == []


@pytest.mark.asyncio
async def test_authentication_rejects_wrong_token(bare_app):
    handler, calls = calls_counter()
    guarded = authentication(handler, expected_token="valid_token")

    async with bare_app.test_request_context("/users", headers={"Authorization": "Bearer nope"}):
        response = await guarded(request)

    assert response.status_code == 401
    assert calls == []


@pytest.mark.asyncio
async def test_authentication_passes_valid_token(bare_app):
    handler, calls = calls_counter()
    guarded = partial(authentication, expected_token="valid_token")(handler)

    async with bare_app.test_request_context("/users", headers={"Authorization": "Bearer valid_token"}):
        response = await guarded(request)

    assert response.status_code == 200
    assert calls == ["/users"]


@pytest.mark.asyncio
async def test_error_handling_converts_fault(bare_app):
    async def broken(request_):
        raise KeyError("secret internal detail")

    with capture_logs() as cap_logs:
        async with bare_app.test_request_context("/users/1"):
            response = await error_handling(broken)(request)

    body = await response.get_data(as_text=True)
    assert response.status_code == 500
    assert await response.get_json() == {"error": "Internal server error."}
    assert "secret internal detail" not in body

    fault = [entry for entry in cap_logs if entry["event"] == "unhandled_exception"]
    assert len(fault) == 1
    assert fault[0]["log_level"] == "error"
    assert fault[0]["error_type"] == "KeyError"
    assert fault[0]["exc_info"] is True


@pytest.mark.asyncio
async def test_error_handling_passes_through_responses(bare_app):
    handler, calls = calls_counter()

    async with bare_app.test_request_context("/"):
        response = await error_handling(handler)(request)

    assert response.status_code == 200
    assert calls == ["/"]


@pytest.mark.asyncio
async def test_request_logging_records_request_and_status(bare_app):
    async def handler(request_):
        return Response("missing", status=404)

    with capture_logs() as cap_logs:
        async with bare_app.test_request_context("/users/9999", method="GET"):
            response = await request_logging(handler)(request)

    assert response.status_code == 404
    assert [entry["event"] for entry in cap_logs] == ["request_started", "request_finished"]
    assert cap_logs[0]["method"] == "GET"
    assert cap_logs[0]["path"] == "/users/9999"
    assert cap_logs[1]["status_code"] == 404


@pytest.mark.asyncio
async def test_request_logging_does_not_alter_response(bare_app):
    original = Response("body", status=201, headers={"X-Test": "1"})

    async def handler(request_):
        return original

    async with bare_app.test_request_context("/users", method="POST"):
        response = await request_logging(handler)(request)

    assert response is original
