import json

import pytest

from places_app.errors import PersistError, StoreError
from places_app.models import Place, PlaceCollection
from places_app.store import PlaceStore


def _sample():
    return PlaceCollection([
        Place(id="a", title="Lighthouse", image_url="https://x/a.jpg", image_public_id="places/a",
              created_at="2025-01-01T00:00:00.000Z"),
        Place(id="b", title="Harbour", image_url="https://x/b.jpg", image_public_id="places/b",
              created_at="2025-01-02T00:00:00.000Z", updated_at="2025-01-03T00:00:00.000Z"),
    ])


def test_missing_file_loads_empty(store):
    assert len(store.load()) == 0


def test_empty_file_loads_empty(db_path, store):
    db_path.write_text("", encoding="utf-8")
    assert len(store.load()) == 0


def test_round_trip_preserves_order_and_fields(store):
    collection = _sample()
    store.persist(collection)

    reloaded = store.load()
    assert reloaded == collection
    assert reloaded.ids() == ["a", "b"]


def test_document_layout(db_path, store):
    store.persist(_sample())

    document = json.loads(db_path.read_text(encoding="utf-8"))
    assert list(document) == ["places"]
    first, second = document["places"]
    assert first == {
        "id": "a",
        "title": "Lighthouse",
        "imageUrl": "https://x/a.jpg",
        "imagePublicId": "places/a",
        "createdAt": "2025-01-01T00:00:00.000Z",
    }
    assert second["updatedAt"] == "2025-01-03T00:00:00.000Z"


def test_load_replaces_previous_snapshot(store):
    store.persist(_sample())
    first = store.load()
    first.remove("a")

    assert store.load().ids() == ["a", "b"]


def test_corrupt_file_raises_store_error(db_path, store):
    db_path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StoreError):
        store.load()


def test_non_object_document_raises_store_error(db_path, store):
    db_path.write_text("[]", encoding="utf-8")
    with pytest.raises(StoreError):
        store.load()


def test_persist_failure_raises_persist_error(tmp_path):
    target = tmp_path / "as-dir"
    target.mkdir()
    with pytest.raises(PersistError):
        PlaceStore(target).persist(_sample())


def test_persist_creates_parent_directory(tmp_path):
    store = PlaceStore(tmp_path / "data" / "db.json")
    store.persist(_sample())
    assert store.load().ids() == ["a", "b"]


def test_init_never_overwrites(store):
    assert store.init() is True
    assert len(store.load()) == 0

    store.persist(_sample())
    assert store.init() is False
    assert len(store.load()) == 2


def test_collection_rejects_duplicate_ids():
    collection = _sample()
    with pytest.raises(ValueError):
        collection.append(Place(id="a", title="Again"))


def test_record_without_created_at_round_trips_unchanged(db_path, store):
    db_path.write_text(json.dumps({"places": [{"id": "old", "title": "Legacy"}]}), encoding="utf-8")

    first = store.load()
    assert first.find("old").created_at is None
    store.persist(first)

    assert store.load() == first
    assert store.load().find("old").created_at is None
