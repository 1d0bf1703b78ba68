# Middleware Package
# Each module defines one request interceptor: a function that takes the next
# handler in the chain and returns a handler with the same signature.
# The chain is assembled once in app.create_app via pipeline.build_pipeline.

from .authentication import authentication, extract_token
from .error_handling import error_handling
from .pipeline import Handler, Middleware, build_pipeline
from .request_logging import request_logging

__all__ = [
    'Handler',
    'Middleware',
    'authentication',
    'build_pipeline',
    'error_handling',
    'extract_token',
    'request_logging',
]
