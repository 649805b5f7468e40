"""
Pydantic models for blog posts.

``PostCreate`` is the upload body.  ``id`` and ``date`` are assigned by
the server, so a client‑supplied ``date`` is ignored.  ``PostRead``
mirrors a row of the ``posts`` table.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .user import MessageResponse


class PostCreate(BaseModel):
    """Schema for uploading a post."""

    title: str = Field(..., examples=["First post"])
    content: str = Field(..., examples=["Hello, world"])
    author: str = Field(..., examples=["user@example.com"])
    category: Optional[str] = Field(None, examples=["general"])
    # Data URI or URL
    image: Optional[str] = Field(None, examples=["https://example.com/cat.png"])


class PostRead(BaseModel):
    """Schema for reading a post from the API."""

    id: int
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    category: Optional[str] = None
    image: Optional[str] = None
    date: Optional[str] = None


class PostCreatedResponse(MessageResponse):
    post: PostRead
