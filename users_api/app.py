"""
User Management API Application

A Quart-based API serving CRUD operations over an in-memory user collection.
Every request runs through the middleware pipeline:
error handling -> authentication -> request logging -> route dispatch.
"""

from functools import partial
from typing import Optional

from dotenv import load_dotenv
from quart import Quart, Request, Response
from quart.globals import request_ctx
from werkzeug.exceptions import HTTPException

from users_api.config.settings import Settings, settings as default_settings
from users_api.core.logging import configure_logging, get_logger
from users_api.middleware import (
    Handler,
    authentication,
    build_pipeline,
    error_handling,
    request_logging,
)
from users_api.routes.errors import http_exception_response
from users_api.routes.general import general_routes
from users_api.routes.users import users_routes
from users_api.services.user_store import UserStore

# Load environment variables
load_dotenv()

logger = get_logger(__name__)


class UsersApi(Quart):
    """Quart application that hands every request to its middleware pipeline"""

    pipeline: Optional[Handler] = None
    user_store: Optional[UserStore] = None

    async def dispatch_request(self, request_context=None):
        if self.pipeline is None:
            return await super().dispatch_request(request_context)
        request_ = (request_context or request_ctx).request
        return await self.pipeline(request_)

    async def route_request(self, request_: Request) -> Response:
        """Innermost handler: run the matched view and normalise its result"""
        try:
            rv = await super().dispatch_request()
        except HTTPException as e:
            return http_exception_response(e)
        return await self.make_response(rv)


def create_app(settings: Settings = None):
    """Create and configure the app"""
    settings = settings or default_settings

    configure_logging(settings)
    logger.info("creating_application", environment=settings.environment)

    app = UsersApi(__name__, static_folder=None)

    app.config['DEBUG'] = settings.debug
    app.config['PROVIDE_AUTOMATIC_OPTIONS'] = True

    app.user_store = UserStore.seeded()
    logger.info("user_store_seeded", users=len(app.user_store))

    # Register routes
    app.register_blueprint(general_routes)
    app.register_blueprint(users_routes)

    # Outermost first
    app.pipeline = build_pipeline(app.route_request, [
        error_handling,
        partial(authentication, expected_token=settings.auth_token.get_secret_value()),
        request_logging,
    ])

    logger.info("application_created")
    return app
