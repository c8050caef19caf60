import json

from repositories import FileBackend
from store import ItemStore


def test_creates_empty_file_on_first_run(items_file):
    FileBackend(items_file)
    assert json.loads(items_file.read_text(encoding="utf-8")) == []


def test_existing_file_is_not_overwritten(items_file):
    items_file.parent.mkdir(parents=True)
    items_file.write_text('[{"id": "keep"}]', encoding="utf-8")
    assert FileBackend(items_file).load() == [{"id": "keep"}]


def test_empty_or_non_array_file_loads_as_nothing(items_file):
    backend = FileBackend(items_file)
    items_file.write_text("", encoding="utf-8")
    assert backend.load() == []
    items_file.write_text('{"id": "x"}', encoding="utf-8")
    assert backend.load() == []


def test_save_overwrites_whole_file(items_file):
    backend = FileBackend(items_file)
    backend.save([{"id": "a"}, {"id": "b"}])
    backend.save([{"id": "b"}])
    assert json.loads(items_file.read_text(encoding="utf-8")) == [{"id": "b"}]
    assert not items_file.with_suffix(".tmp").exists()


def test_corrupt_file_degrades_to_empty_store(items_file):
    backend = FileBackend(items_file)
    items_file.write_text("{not json", encoding="utf-8")
    s = ItemStore(backend)
    s.load_all()
    assert len(s) == 0


def test_restart_round_trip_is_byte_identical(file_store, items_file):
    file_store.create({"name": "Amy", "dish": "Salad", "section": "appetizers"})
    file_store.create({"name": "Bob", "dish": "Pie", "section": "dessert"})
    file_store.create({"name": "Çelik", "dish": "Börek", "section": "entree"})
    before = items_file.read_bytes()

    restarted = ItemStore(FileBackend(items_file))
    restarted.load_all()
    assert restarted.list_items() == file_store.list_items()
    restarted.flush()
    assert items_file.read_bytes() == before


def test_flush_writes_exact_id_set(file_store, items_file):
    kept = file_store.create({"name": "Amy", "dish": "Salad", "section": "appetizers"})
    gone = file_store.create({"name": "Bob", "dish": "Pie", "section": "dessert"})
    file_store.delete(gone["id"])
    on_disk = json.loads(items_file.read_text(encoding="utf-8"))
    assert {it["id"] for it in on_disk} == {kept["id"]}
