"""
Top‑level API router.

Aggregates the account and post routers.  Exactly one account router
is included, chosen by the account mode: the strict router exposes
``/register`` and ``/login``, the auto‑register router only ``/login``.
"""

from fastapi import APIRouter

from ..core.config import ACCOUNT_MODES
from .endpoints import accounts, posts


def build_router(account_mode: str = "strict") -> APIRouter:
    if account_mode not in ACCOUNT_MODES:
        raise ValueError(
            f"Unknown account mode {account_mode!r}; expected one of {', '.join(ACCOUNT_MODES)}"
        )
    router = APIRouter()
    if account_mode == "strict":
        router.include_router(accounts.strict_router, tags=["accounts"])
    else:
        router.include_router(accounts.auto_register_router, tags=["accounts"])
    router.include_router(posts.router, prefix="/posts", tags=["posts"])
    return router
