"""
Business logic for accounts.

Two login flows exist and are selected once, at application startup:

* ``strict``: accounts are created by ``register``; ``login`` only
  checks credentials.
* ``auto_register``: ``login_or_register`` creates the account on the
  first login with an unknown email.

Passwords pass through ``core.security``; this module never compares
them itself.
"""

import logging
from dataclasses import dataclass

from ..core.db import Storage
from ..core.errors import AuthFailure, IntegrityFailure, StorageFailure, ValidationConflict
from ..core.security import prepare_password, verify_password

logger = logging.getLogger(__name__)


@dataclass
class LoginResult:
    """Outcome of a successful login."""

    email: str
    created: bool = False


class AccountService:
    """Register and authenticate users stored in the ``users`` table."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    async def register(self, email: str, password: str) -> None:
        """Create a new account.

        Raises ``ValidationConflict`` when the email is already taken
        and ``StorageFailure`` when the lookup or insert fails.
        """
        if self._find(email):
            logger.info("Registration rejected, %s already exists", email)
            raise ValidationConflict("Email already exists")
        try:
            user_id = self.storage.insert_user(email, prepare_password(password))
        except IntegrityFailure as exc:
            # Another writer registered the same email after the lookup.
            logger.info("Registration rejected, %s already exists", email)
            raise ValidationConflict("Email already exists") from exc
        except StorageFailure as exc:
            logger.exception("Registration failed for %s", email)
            raise StorageFailure("Registration failed") from exc
        logger.info("Registered user %s (id %s)", email, user_id)

    async def login(self, email: str, password: str) -> LoginResult:
        """Check credentials against an existing account.

        Returns the account email on success; raises ``AuthFailure``
        when the email is unknown or the password does not match.
        """
        row = self._find(email)
        if not row or not verify_password(password, row["password"]):
            logger.info("Failed login for %s", email)
            raise AuthFailure("Invalid email or password")
        logger.info("User %s logged in", email)
        return LoginResult(email=row["email"])

    async def login_or_register(self, email: str, password: str) -> LoginResult:
        """Log in, creating the account first if the email is unknown.

        A new account is reported with ``created=True``.  For an
        existing account the password must match.
        """
        row = self._find(email)
        if row is None:
            try:
                user_id = self.storage.insert_user(email, prepare_password(password))
            except IntegrityFailure as exc:
                logger.info("Automatic registration lost a race for %s", email)
                raise ValidationConflict("Email already exists") from exc
            except StorageFailure as exc:
                logger.exception("Automatic registration failed for %s", email)
                raise StorageFailure("Registration failed") from exc
            logger.info("Registered user %s on first login (id %s)", email, user_id)
            return LoginResult(email=email, created=True)
        if not verify_password(password, row["password"]):
            logger.info("Failed login for %s", email)
            raise AuthFailure("Invalid email or password")
        logger.info("User %s logged in", email)
        return LoginResult(email=row["email"])

    def _find(self, email: str):
        try:
            return self.storage.find_user_by_email(email)
        except StorageFailure as exc:
            logger.exception("User lookup failed for %s", email)
            raise StorageFailure("Database error") from exc
