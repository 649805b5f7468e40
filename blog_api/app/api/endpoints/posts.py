"""
Post endpoints.

Upload, list and delete blog posts.  None of these routes require
authentication.  The list is returned in full, newest first.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from ...schemas.post import PostCreate, PostCreatedResponse, PostRead
from ...schemas.user import MessageResponse
from ...services.post_service import PostService
from ..deps import get_post_service

router = APIRouter()


@router.post("", response_model=PostCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    body: PostCreate,
    service: PostService = Depends(get_post_service),
) -> PostCreatedResponse:
    """Upload a post.

    ``category`` defaults to ``"general"``; ``id`` and ``date`` are
    assigned by the server.
    """
    post = await service.create(
        title=body.title,
        content=body.content,
        author=body.author,
        category=body.category,
        image=body.image,
    )
    return PostCreatedResponse(message="Post uploaded", post=post)


@router.get("", response_model=List[PostRead])
async def list_posts(service: PostService = Depends(get_post_service)) -> List[PostRead]:
    return await service.list()


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    """Delete a post by ID.

    Succeeds even when no post has this ID, including IDs that are
    not numbers.
    """
    await service.delete(post_id)
    return MessageResponse(message="Post deleted")
