"""
General routes for the users API
"""

from quart import Blueprint, Response

from users_api.core.logging import get_logger

logger = get_logger(__name__)

WELCOME_MESSAGE = "Welcome to the User Management API!"

general_routes = Blueprint('general', __name__)


@general_routes.route('/')
async def welcome():
    """Welcome message endpoint"""
    logger.debug("welcome_endpoint_accessed")
    return Response(WELCOME_MESSAGE, content_type='text/plain; charset=utf-8')
