"""
Password handling.

All password processing goes through this module so a hashing scheme
(e.g. PBKDF2 or bcrypt) can be introduced without touching the
services.  Passwords are currently stored as given and compared with
plain equality.
"""


def prepare_password(password: str) -> str:
    """Return the value to persist for ``password``."""
    return password


def verify_password(plain_password: str, stored_password: str) -> bool:
    """Check a login attempt against the stored value."""
    if stored_password is None:
        return False
    return plain_password == stored_password
