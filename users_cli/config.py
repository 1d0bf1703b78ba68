"""
Configuration management for CLI app
"""
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr


class Config(BaseModel):
    """Application configuration loaded from .env file"""

    api_base_url: str = Field(default="http://127.0.0.1:5000")
    api_timeout: int = Field(default=30)
    api_token: SecretStr = Field(default=SecretStr("valid_token"))
    auth_scheme: str = Field(default="Bearer")

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from .env file with sensible defaults"""
        load_dotenv()
        return cls(
            api_base_url=os.getenv("API_BASE_URL", "http://127.0.0.1:5000"),
            api_timeout=int(os.getenv("API_TIMEOUT", "30")),
            api_token=os.getenv("API_TOKEN", "valid_token"),
            auth_scheme=os.getenv("API_AUTH_SCHEME", "Bearer"),
        )

    @property
    def authorization(self) -> str:
        return f"{self.auth_scheme} {self.api_token.get_secret_value()}"
