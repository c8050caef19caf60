"""Pydantic schemas for API responses."""

from .items import ErrorResponse, Item

__all__ = ["ErrorResponse", "Item"]
