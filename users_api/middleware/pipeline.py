"""
Middleware composition.

A handler takes the current request and produces a response. A middleware
takes the next handler and returns a new handler with the same signature, so
middlewares nest to any depth.
"""

from typing import Awaitable, Callable, Iterable

from quart import Request, Response

Handler = Callable[[Request], Awaitable[Response]]
Middleware = Callable[[Handler], Handler]


def build_pipeline(handler: Handler, middlewares: Iterable[Middleware]) -> Handler:
    """
    Wrap a handler in middlewares.

    Args:
        handler: The innermost handler (route dispatch)
        middlewares: Middlewares listed outermost first

    Returns:
        A handler that runs the first middleware, which runs the second,
        and so on down to the wrapped handler
    """
    wrapped = handler
    for middleware in reversed(list(middlewares)):
        wrapped = middleware(wrapped)
    return wrapped
