"""
Pydantic models for the users API

These models describe stored users and the payloads accepted on create/update.
"""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    A stored user.

    Instances are immutable; the store replaces them wholesale on update.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0, description="Store-assigned identifier")
    name: str
    age: int


class UserPayload(BaseModel):
    """
    Request body for POST /users and PUT /users/<id>.

    Only checks the shape of the body. Any ``id`` sent by the client is
    dropped; the name and age rules live in services.validation.
    """
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., strict=True, description="Display name of the user")
    age: int = Field(..., strict=True, description="Age in years")
