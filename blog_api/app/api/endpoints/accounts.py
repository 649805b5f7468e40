"""
Account endpoints.

Two routers are defined and only one of them is mounted:

* ``strict_router``: ``POST /register`` creates accounts, ``POST /login``
  checks credentials.
* ``auto_register_router``: ``POST /login`` creates the account on first
  use (201) and logs in existing accounts (200).

Passwords are stored and compared as given; see ``core.security``.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ...schemas.user import Credentials, LoginResponse, MessageResponse
from ...services.account_service import AccountService
from ..deps import get_account_service

strict_router = APIRouter()
auto_register_router = APIRouter()


@strict_router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(
    body: Credentials,
    service: AccountService = Depends(get_account_service),
) -> MessageResponse:
    """Register a new account.

    Returns 400 if the email is already registered.
    """
    await service.register(body.email, body.password)
    return MessageResponse(message="Registration successful")


@strict_router.post("/login", response_model=LoginResponse)
async def login(
    body: Credentials,
    service: AccountService = Depends(get_account_service),
) -> LoginResponse:
    """Check credentials and echo the account email."""
    result = await service.login(body.email, body.password)
    return LoginResponse(message="Login successful", user=result.email)


@auto_register_router.post("/login", response_model=LoginResponse)
async def login_or_register(
    body: Credentials,
    service: AccountService = Depends(get_account_service),
):
    """Log in, creating the account if the email is unknown."""
    result = await service.login_or_register(body.email, body.password)
    if result.created:
        payload = LoginResponse(message="Welcome! Your account has been created", user=result.email)
        return JSONResponse(status_code=status.HTTP_201_CREATED, content=payload.model_dump())
    return LoginResponse(message="Login successful", user=result.email)
