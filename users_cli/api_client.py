"""
HTTP client for all API interactions
"""
from typing import List, Optional

import httpx
from pydantic import ValidationError

from users_cli.config import Config
from users_cli.models import APIError, UserData, UserWrite


def error_message(response: httpx.Response) -> str:
    """Extract the API's error message from a failed response"""
    try:
        return APIError(**response.json()).error
    except (ValueError, TypeError, ValidationError):
        return response.text or response.reason_phrase


class APIClient:
    """Client for interacting with the User Management API"""

    def __init__(self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = config.api_base_url.rstrip("/")
        self.timeout = config.api_timeout
        self.headers = {"Authorization": config.authorization}
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
            transport=self.transport,
        )

    async def welcome(self) -> str:
        """Fetch the welcome message"""
        async with self._client() as client:
            response = await client.get("/")
            response.raise_for_status()
            return response.text

    async def list_users(self) -> List[UserData]:
        """Get all users"""
        async with self._client() as client:
            response = await client.get("/users")
            response.raise_for_status()
            return [UserData(**item) for item in response.json()]

    async def get_user(self, user_id: int) -> UserData:
        """Get one user"""
        async with self._client() as client:
            response = await client.get(f"/users/{user_id}")
            response.raise_for_status()
            return UserData(**response.json())

    async def create_user(self, user: UserWrite) -> UserData:
        """Create a new user"""
        async with self._client() as client:
            response = await client.post("/users", json=user.model_dump())
            response.raise_for_status()
            return UserData(**response.json())

    async def update_user(self, user_id: int, user: UserWrite) -> None:
        """Replace a user's name and age"""
        async with self._client() as client:
            response = await client.put(f"/users/{user_id}", json=user.model_dump())
            response.raise_for_status()

    async def delete_user(self, user_id: int) -> None:
        """Delete a user"""
        async with self._client() as client:
            response = await client.delete(f"/users/{user_id}")
            response.raise_for_status()
