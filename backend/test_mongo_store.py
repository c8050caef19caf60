from unittest import mock

import mongomock
import pytest

from errors import PersistenceError
from repositories.mongo_store import MongoBackend
from store import ItemStore


@pytest.fixture
def collection():
    return mongomock.MongoClient()["potluck"]["items"]


@pytest.fixture
def mongo_store(collection, clock):
    return ItemStore(MongoBackend(collection, transactional=False), clock=clock)


def _ids(collection):
    return {doc["_id"] for doc in collection.find({})}


def test_documents_are_keyed_by_item_id(mongo_store, collection):
    item = mongo_store.create({"name": "Amy", "dish": "Salad", "section": "appetizers"})
    doc = collection.find_one({"_id": item["id"]})
    assert doc["dish"] == "Salad"
    assert "id" not in doc


def test_flush_reconciles_id_set(mongo_store, collection):
    a = mongo_store.create({"name": "Amy", "dish": "Salad", "section": "appetizers"})
    b = mongo_store.create({"name": "Bob", "dish": "Pie", "section": "dessert"})
    collection.insert_one({"_id": "orphan", "name": "Old", "dish": "Soup", "section": "entree"})
    mongo_store.delete(b["id"])
    assert _ids(collection) == {a["id"]}


def test_flush_of_empty_store_clears_collection(collection):
    collection.insert_many([{"_id": "x"}, {"_id": "y"}])
    s = ItemStore(MongoBackend(collection, transactional=False))
    s.flush()
    assert _ids(collection) == set()


def test_update_replaces_document(mongo_store, collection):
    item = mongo_store.create({"name": "Amy", "dish": "Salad", "section": "appetizers"})
    mongo_store.update(item["id"], {"name": "Amy", "dish": "Fruit Salad", "section": "appetizers"})
    assert collection.find_one({"_id": item["id"]})["dish"] == "Fruit Salad"
    assert collection.count_documents({}) == 1


def test_reload_round_trip(mongo_store, collection):
    created = [
        mongo_store.create({"name": "Amy", "dish": "Salad", "section": "appetizers"}),
        mongo_store.create({"name": "Bob", "dish": "Pie", "section": "dessert"}),
    ]
    restarted = ItemStore(MongoBackend(collection, transactional=False))
    restarted.load_all()
    assert restarted.list_items() == created


def test_transactional_save_runs_bulk_write_inside_session():
    collection = mock.MagicMock()
    client = mock.MagicMock()
    session = client.start_session.return_value.__enter__.return_value
    session.with_transaction.side_effect = lambda callback: callback(session)

    backend = MongoBackend(collection, client=client)
    backend.save([{"id": "a1", "name": "Amy"}])

    session.with_transaction.assert_called_once()
    args, kwargs = collection.bulk_write.call_args
    assert kwargs == {"ordered": True, "session": session}
    assert len(args[0]) == 2


def test_transaction_abort_surfaces_as_persistence_error(clock):
    collection = mock.MagicMock()
    client = mock.MagicMock()
    session = client.start_session.return_value.__enter__.return_value
    session.with_transaction.side_effect = RuntimeError("transaction aborted")

    s = ItemStore(MongoBackend(collection, client=client), clock=clock)
    with pytest.raises(PersistenceError):
        s.create({"name": "Amy", "dish": "Salad", "section": "appetizers"})
    assert len(s) == 0


def test_without_client_transactions_are_off(collection):
    assert MongoBackend(collection).transactional is False
