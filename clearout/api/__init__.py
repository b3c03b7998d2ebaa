"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from clearout.api import app

    uvicorn clearout.api:app --reload
"""

from clearout.api.app import app

__all__ = ["app"]
