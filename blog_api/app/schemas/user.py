"""
Pydantic models for account payloads.

Registration and login share the same body: an email and a password.
Responses never include the password.
"""

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Body of ``POST /api/register`` and ``POST /api/login``."""

    email: str = Field(..., examples=["user@example.com"])
    password: str = Field(..., examples=["secret"])


class MessageResponse(BaseModel):
    message: str


class LoginResponse(MessageResponse):
    """Successful login; ``user`` echoes the account email."""

    user: str
