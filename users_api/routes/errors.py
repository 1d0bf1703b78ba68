"""
Error responses for the users API

Every error leaves the service as a JSON object with a single "error" key.
"""

from quart import Response, jsonify
from werkzeug.exceptions import HTTPException


def error_response(message: str, status_code: int) -> Response:
    """Build a JSON error response"""
    response = jsonify({'error': message})
    response.status_code = status_code
    return response


def http_exception_response(error: HTTPException) -> Response:
    """Render a routing failure (unknown path, wrong method) as a JSON error"""
    response = error_response(error.name, error.code or 500)
    if error.code == 405 and getattr(error, 'valid_methods', None):
        response.headers['Allow'] = ', '.join(error.valid_methods)
    return response
