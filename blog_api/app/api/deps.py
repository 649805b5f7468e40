"""
FastAPI dependencies that hand the application's storage handle to
the services.
"""

from fastapi import Depends, Request

from ..core.db import Storage
from ..services.account_service import AccountService
from ..services.post_service import PostService


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_account_service(storage: Storage = Depends(get_storage)) -> AccountService:
    return AccountService(storage)


def get_post_service(storage: Storage = Depends(get_storage)) -> PostService:
    return PostService(storage)
