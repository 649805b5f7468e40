"""
Endpoint modules.

Each module defines the APIRouter(s) for one domain; they are
aggregated in ``api/router.py``.
"""
