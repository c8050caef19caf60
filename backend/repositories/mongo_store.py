"""
MongoDB implementation of ItemBackend.
One document per item, keyed by ``_id`` = item id.
"""

import logging
from typing import Optional

from pymongo import DeleteMany, MongoClient, ReplaceOne
from pymongo.collection import Collection

logger = logging.getLogger(__name__)


def _to_document(item: dict) -> dict:
    doc = {k: v for k, v in item.items() if k != "id"}
    doc["_id"] = item["id"]
    return doc


def _from_document(doc: dict) -> dict:
    item = {"id": doc.get("_id")}
    item.update({k: v for k, v in doc.items() if k != "_id"})
    return item


class MongoBackend:
    """Document-collection persistence with set-difference reconciliation.

    ``save`` upserts every in-memory item and deletes every document whose
    id is no longer in memory, as one ordered bulk write. With
    ``transactional`` set the bulk write runs inside a session transaction,
    so a failed flush leaves the collection untouched (requires a replica
    set or sharded cluster).
    """

    def __init__(
        self,
        collection: Collection,
        client: Optional[MongoClient] = None,
        transactional: bool = True,
    ):
        self.collection = collection
        self.client = client
        self.transactional = transactional and client is not None

    @classmethod
    def from_url(
        cls,
        url: str,
        database: str,
        collection: str,
        transactional: bool = True,
    ) -> "MongoBackend":
        client = MongoClient(url)
        logger.info("Using MongoDB collection %s.%s", database, collection)
        return cls(client[database][collection], client=client, transactional=transactional)

    def load(self) -> list[dict]:
        return [_from_document(doc) for doc in self.collection.find({})]

    def _operations(self, items: list[dict]) -> list:
        ops = [
            ReplaceOne({"_id": item["id"]}, _to_document(item), upsert=True)
            for item in items
        ]
        ops.append(DeleteMany({"_id": {"$nin": [item["id"] for item in items]}}))
        return ops

    def save(self, items: list[dict]) -> None:
        ops = self._operations(items)
        if not self.transactional:
            self.collection.bulk_write(ops, ordered=True)
            return
        with self.client.start_session() as session:
            session.with_transaction(
                lambda s: self.collection.bulk_write(ops, ordered=True, session=s)
            )

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
