"""Response models for the items API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Item(BaseModel):
    """A potluck sign-up as returned by the API."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    dish: str = ""
    section: str = ""
    createdAt: Optional[int] = None
    updatedAt: Optional[int] = None


class ErrorResponse(BaseModel):
    error: str
