"""
Error messages shared by the routes and the middleware.

Expected failures (bad payloads, missing users) are answered directly by the
route that detects them; only unexpected faults travel as exceptions.
"""

UNAUTHORIZED = "Unauthorized"
INTERNAL_SERVER_ERROR = "Internal server error."
USER_NOT_FOUND = "User not found."
INVALID_BODY = "Request body must be a JSON object."

EMPTY_NAME = "User name cannot be empty."
NUMERIC_NAME = "User name cannot be numbers."
AGE_OUT_OF_RANGE = "Age out of range; must be between 1 and 150."
