from pydantic import BaseModel, Field

from .base import StateModel


class Credentials(BaseModel):
    """Sign in and sign up body."""
    mail: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    id: str
    mail: str

    class Config:
        from_attributes = True


class UserCreatedResponse(StateModel):
    data: UserResponse
