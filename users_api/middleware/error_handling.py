"""
Outermost middleware: turns any unhandled fault into a generic 500.
"""

from quart import Request, Response

from users_api.core import errors
from users_api.core.logging import get_logger
from users_api.middleware.pipeline import Handler
from users_api.routes.errors import error_response

logger = get_logger(__name__)


def error_handling(next_handler: Handler) -> Handler:
    """Catch every exception raised further down the chain"""

    async def handle(request: Request) -> Response:
        try:
            return await next_handler(request)
        except Exception as e:
            # The cause goes to the log only, never to the client
            logger.exception("unhandled_exception",
                             error=str(e),
                             error_type=type(e).__name__,
                             method=request.method,
                             path=request.path)
            return error_response(errors.INTERNAL_SERVER_ERROR, 500)

    return handle
