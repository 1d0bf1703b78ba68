"""
Innermost middleware: records each request and the status it ended with.
"""

from quart import Request, Response

from users_api.core.logging import get_logger
from users_api.middleware.pipeline import Handler

logger = get_logger(__name__)


def request_logging(next_handler: Handler) -> Handler:
    """Log method and path on the way in, status code on the way out"""

    async def handle(request: Request) -> Response:
        logger.info("request_started", method=request.method, path=request.path)

        response = await next_handler(request)

        logger.info("request_finished",
                    method=request.method,
                    path=request.path,
                    status_code=response.status_code)
        return response

    return handle
