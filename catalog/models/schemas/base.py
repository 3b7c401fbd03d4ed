from typing import Optional

from pydantic import BaseModel, ConfigDict


class CamelModel(BaseModel):
    """Snake case in Python, camel case on the wire."""

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=lambda x: "".join(
            word.capitalize() if i else word for i, word in enumerate(x.split("_"))
        ),
    )


class StateModel(BaseModel):
    """Every response carries ``state``; callers branch on it."""
    state: bool = True


class MessageResponse(StateModel):
    message: str


class TokenResponse(MessageResponse):
    token: Optional[str] = None
