"""
User Management CLI

Interactive terminal client for the User Management API.
"""

__version__ = "1.0.0"
