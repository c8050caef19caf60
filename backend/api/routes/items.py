"""Potluck item list, create, update, delete."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from api.deps import get_store
from errors import NotFound, PersistenceError, ValidationError
from schemas import ErrorResponse, Item
from store import ItemStore
from validation import validate_item

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/items",
    tags=["items"],
    responses={500: {"model": ErrorResponse}},
)

StoreDep = Annotated[ItemStore, Depends(get_store)]
Payload = Annotated[Any, Body()]


def _validated(payload: Any) -> dict:
    try:
        return validate_item(payload)
    except ValidationError as e:
        raise HTTPException(400, e.detail)


@router.get("", response_model=list[Item])
async def list_items(store: StoreDep):
    try:
        return store.list_items()
    except Exception as e:
        logger.error("List error: %s", e, exc_info=True)
        raise HTTPException(500, "Failed to fetch items")


@router.post(
    "",
    response_model=Item,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_item(store: StoreDep, payload: Payload = None):
    fields = _validated(payload)
    try:
        return store.create(fields)
    except PersistenceError:
        raise HTTPException(500, "Failed to create item")


@router.put(
    "/{item_id}",
    response_model=Item,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_item(item_id: str, store: StoreDep, payload: Payload = None):
    fields = _validated(payload)
    try:
        return store.update(item_id, fields)
    except NotFound as e:
        raise HTTPException(404, e.detail)
    except PersistenceError:
        raise HTTPException(500, "Failed to update item")


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_item(item_id: str, store: StoreDep):
    try:
        store.delete(item_id)
    except NotFound as e:
        raise HTTPException(404, e.detail)
    except PersistenceError:
        raise HTTPException(500, "Failed to delete item")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
