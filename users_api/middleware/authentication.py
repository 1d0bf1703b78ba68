"""
Bearer token check.

The token is compared against a single configured value. This is a stand-in
for real credential verification and must not be used as one.
"""

import secrets
from typing import Optional

from quart import Request, Response

from users_api.core import errors
from users_api.core.logging import get_logger
from users_api.middleware.pipeline import Handler
from users_api.routes.errors import error_response

logger = get_logger(__name__)


def extract_token(authorization: Optional[str]) -> Optional[str]:
    """
    Pull the token out of an Authorization header value.

    The token is whatever follows the last space, so ``Bearer abc`` gives
    ``abc`` and a bare ``abc`` gives ``abc`` as well.
    """
    if not authorization:
        return None
    return authorization.split(" ")[-1] or None


def authentication(next_handler: Handler, *, expected_token: str) -> Handler:
    """
    Reject requests that do not carry the expected token.

    Bind ``expected_token`` with functools.partial before adding this to a
    pipeline.
    """

    async def handle(request: Request) -> Response:
        token = extract_token(request.headers.get("Authorization"))

        if token is None or not secrets.compare_digest(token.encode(), expected_token.encode()):
            logger.warning("request_unauthorized",
                           method=request.method,
                           path=request.path,
                           token_present=token is not None)
            return error_response(errors.UNAUTHORIZED, 401)

        return await next_handler(request)

    return handle
