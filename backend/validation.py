"""Item payload validation and normalization."""

from collections.abc import Mapping
from typing import Any

from errors import DishRequired, InvalidSection, NameRequired

SECTIONS = ("appetizers", "entree", "dessert", "beverages")


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def validate_item(payload: Any) -> dict:
    """Return normalized {name, dish, section} or raise a ValidationError.

    Rules are checked in order and the first failure wins. Fields other
    than name/dish/section (client ids, timestamps) are dropped.
    """
    if not isinstance(payload, Mapping):
        payload = {}
    name = _text(payload.get("name"))
    dish = _text(payload.get("dish"))
    section = _text(payload.get("section")).lower()
    if not name:
        raise NameRequired()
    if not dish:
        raise DishRequired()
    if section not in SECTIONS:
        raise InvalidSection()
    return {"name": name, "dish": dish, "section": section}
