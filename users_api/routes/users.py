"""
User CRUD routes

Bad payloads (400) and unknown ids (404) are answered here. Anything else that
goes wrong is logged and re-raised so the error-handling middleware can turn it
into a 500.
"""

from quart import Blueprint, Response, current_app, jsonify, request
from pydantic import ValidationError

from users_api.core import errors
from users_api.core.logging import get_logger
from users_api.models.user import UserPayload
from users_api.routes.errors import error_response
from users_api.services.validation import validate_user

logger = get_logger(__name__)

users_routes = Blueprint('users', __name__)


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    field = '.'.join(str(part) for part in first['loc']) or 'body'
    return f"Invalid value for '{field}': {first['msg']}"


async def _read_payload():
    """
    Parse and check the request body.

    Returns:
        (payload, None) on success or (None, message) on a validation failure
    """
    try:
        data = await request.get_json(force=True, silent=True)
    except UnicodeDecodeError:
        # silent only covers JSON errors, not the text decode before it
        data = None
    if not isinstance(data, dict):
        return None, errors.INVALID_BODY

    try:
        payload = UserPayload.model_validate(data)
    except ValidationError as e:
        return None, _describe_validation_error(e)

    message = validate_user(payload.name, payload.age)
    if message is not None:
        return None, message

    return payload, None


@users_routes.route('/users', methods=['GET'])
async def list_users():
    """
    List all users

    Returns:
        200: JSON array of users
    """
    users = current_app.user_store.list()
    return jsonify([user.model_dump() for user in users])


@users_routes.route('/users/<int:user_id>', methods=['GET'])
async def get_user(user_id: int):
    """
    Retrieve a user by id

    Returns:
        200: The user
        404: No user with that id
    """
    try:
        user = current_app.user_store.get(user_id)
    except Exception as e:
        logger.error("user_retrieval_failed", user_id=user_id, error=str(e))
        raise

    if user is None:
        return error_response(errors.USER_NOT_FOUND, 404)
    return jsonify(user.model_dump())


@users_routes.route('/users', methods=['POST'])
async def create_user():
    """
    Create a user

    Request body:
        {
            "name": "Dana",
            "age": 40
        }

    Returns:
        201: The created user, with a Location header
        400: Validation error
    """
    payload, message = await _read_payload()
    if message is not None:
        logger.info("user_rejected", reason=message)
        return error_response(message, 400)

    user = current_app.user_store.create(payload.name, payload.age)
    logger.info("user_created", user_id=user.id)

    response = jsonify(user.model_dump())
    response.status_code = 201
    response.headers['Location'] = f'/users/{user.id}'
    return response


@users_routes.route('/users/<int:user_id>', methods=['PUT'])
async def update_user(user_id: int):
    """
    Replace a user's name and age

    Returns:
        204: Updated
        400: Validation error
        404: No user with that id
    """
    payload, message = await _read_payload()
    if message is not None:
        logger.info("user_rejected", user_id=user_id, reason=message)
        return error_response(message, 400)

    try:
        user = current_app.user_store.update(user_id, payload.name, payload.age)
    except Exception as e:
        logger.error("user_update_failed", user_id=user_id, error=str(e))
        raise

    if user is None:
        return error_response(errors.USER_NOT_FOUND, 404)
    return Response(status=204)


@users_routes.route('/users/<int:user_id>', methods=['DELETE'])
async def delete_user(user_id: int):
    """
    Delete a user

    Returns:
        204: Deleted
        404: No user with that id
    """
    try:
        deleted = current_app.user_store.delete(user_id)
    except Exception as e:
        logger.error("user_deletion_failed", user_id=user_id, error=str(e))
        raise

    if not deleted:
        return error_response(errors.USER_NOT_FOUND, 404)
    return Response(status=204)
