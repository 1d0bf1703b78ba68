"""
User Management API Package

This package contains the API components for the user management service,
including routes, middleware, services, models, and configuration.
"""

from .app import create_app

__version__ = "1.0.0"

# Export the factory function, not an app instance
__all__ = ['create_app']
