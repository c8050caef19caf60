"""FastAPI dependencies for routes."""

from fastapi import Request

from store import ItemStore


def get_store(request: Request) -> ItemStore:
    """Return the item store attached to the app at creation. Use in Depends()."""
    return request.app.state.store
