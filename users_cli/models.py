"""
Pydantic models mirroring API contracts
"""
from pydantic import BaseModel, Field


# Request models
class UserWrite(BaseModel):
    """Request body for creating or updating a user"""

    name: str = Field(min_length=1)
    age: int


# Response models
class UserData(BaseModel):
    """User as returned by the API"""

    id: int
    name: str
    age: int


class APIError(BaseModel):
    """Error body returned by the API"""

    error: str
