"""
Business logic for blog posts.

Posts are created, listed newest first and deleted.  They are never
updated.  The ``author`` field is a free‑text copy of the uploader's
email; no relation to ``users`` is enforced.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Union

from ..core.db import Storage
from ..core.errors import StorageFailure
from ..schemas.post import PostRead

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "general"


def utc_timestamp() -> str:
    """Current UTC time as ISO‑8601 with milliseconds, e.g. ``2026-01-02T03:04:05.678Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class PostService:
    """Service for the ``posts`` table."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    async def create(
        self,
        title: str,
        content: str,
        author: str,
        category: Optional[str] = None,
        image: Optional[str] = None,
    ) -> PostRead:
        """Store a new post and return it with its id and date.

        An empty or missing ``category`` becomes ``"general"``; an empty
        ``image`` is stored as NULL.
        """
        fields = {
            "title": title,
            "content": content,
            "author": author,
            "category": category or DEFAULT_CATEGORY,
            "image": image or None,
            "date": utc_timestamp(),
        }
        try:
            post_id = self.storage.insert_post(fields)
        except StorageFailure as exc:
            logger.exception("Failed to store post %r", title)
            raise StorageFailure("Upload failed") from exc
        logger.info("Created post %s: %s", post_id, title)
        return PostRead(id=post_id, **fields)

    async def list(self) -> List[PostRead]:
        """Return every post, highest id (most recent) first."""
        try:
            rows = self.storage.list_posts_descending()
        except StorageFailure as exc:
            logger.exception("Failed to list posts")
            raise StorageFailure("Failed to load posts") from exc
        return [PostRead(**row) for row in rows]

    async def delete(self, post_id: Union[int, str]) -> None:
        """Delete a post.

        Deleting an id that does not exist is not an error, and neither
        is an id that is not a number: it simply matches no row.
        """
        if isinstance(post_id, str) and post_id.strip().isdigit():
            post_id = int(post_id)
        try:
            removed = self.storage.delete_post(post_id)
        except StorageFailure as exc:
            logger.exception("Failed to delete post %s", post_id)
            raise StorageFailure("Failed to delete post") from exc
        if removed:
            logger.info("Deleted post %s", post_id)
        else:
            logger.info("Delete requested for missing post %s", post_id)
