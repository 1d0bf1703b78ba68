"""
Tests for middleware composition.
"""

import pytest

from users_api.middleware.pipeline import build_pipeline


def recording(name, calls):
    def middleware(next_handler):
        async def handle(request):
            calls.append(f"{name}:enter")
            response = await next_handler(request)
            calls.append(f"{name}:exit")
            return response
        return handle
    return middleware


@pytest.mark.asyncio
async def test_first_middleware_is_outermost():
    calls = []

    async def handler(request):
        calls.append("handler")
        return f"handled {request}"

    pipeline = build_pipeline(handler, [
        recording("outer", calls),
        recording("middle", calls),
        recording("inner", calls),
    ])

    assert await pipeline("req") == "handled req"
    assert calls == [
        "outer:enter", "middle:enter", "inner:enter",
        "handler",
        "inner:exit", "middle:exit", "outer:exit",
    ]


@pytest.mark.asyncio
async def test_middleware_can_short_circuit():
    calls = []

    def stop(next_handler):
        async def handle(request):
            return "stopped"
        return handle

    async def handler(request):
        calls.append("handler")
        return "handled"

    pipeline = build_pipeline(handler, [recording("outer", calls), stop])

    assert await pipeline("req") == "stopped"
    assert calls == ["outer:enter", "outer:exit"]


@pytest.mark.asyncio
async def test_empty_pipeline_is_the_handler():
    async def handler(request):
        return request

    assert build_pipeline(handler, []) is handler
    assert await build_pipeline(handler, iter([]))("x") == "x"
