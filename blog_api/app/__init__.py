"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Accounts and posts each have a service in ``services``,
request/response schemas in ``schemas`` and a router in
``api/endpoints``.  Storage, configuration, logging and the error
taxonomy live in ``core``.
"""

from .main import app  # noqa: F401
