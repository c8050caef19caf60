"""Durable backend interface the item store reconciles against."""

from typing import Protocol


class ItemBackend(Protocol):
    """Full-state persistence for potluck items.

    ``save`` always receives the complete item list; implementations must
    leave the durable copy holding exactly those items afterwards.
    """

    def load(self) -> list[dict]:
        ...

    def save(self, items: list[dict]) -> None:
        ...

    def close(self) -> None:
        ...
