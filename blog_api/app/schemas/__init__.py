"""
Pydantic schema definitions for API payloads.

Schemas are separated from storage rows to decouple the API
representation from persistence.
"""
