"""Login request schema for credential sign-in."""

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """Payload for login attempts."""

    email: EmailStr
    password: str = Field(min_length=6)
