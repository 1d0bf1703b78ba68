#!/usr/bin/env python3
"""
Run script for the User Management API
"""

from users_api.app import create_app
from users_api.config.settings import settings


def main():
    app = create_app(settings)
    print("Starting User Management API...")
    app.run(
        host=settings.host,
        port=settings.port,
        debug=settings.debug
    )


if __name__ == '__main__':
    main()
