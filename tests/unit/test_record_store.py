"""Unit tests for the InMemoryRecordStore."""

from dataclasses import dataclass, replace

import pytest

from recordbook.domain.exceptions import ValidationError
from recordbook.domain.query import average, field_contains, field_equals, total
from recordbook.infrastructure.storage import InMemoryRecordStore


@dataclass(frozen=True)
class Item:
    name: str
    price: float
    tag: str = "misc"

    @property
    def key(self) -> str:
        return self.name


@pytest.fixture
def store() -> InMemoryRecordStore[Item]:
    s = InMemoryRecordStore[Item]("Item")
    s.add(Item("Apple", 1.0, "fruit"))
    s.add(Item("Bread", 2.5, "bakery"))
    s.add(Item("Cherry", 3.0, "fruit"))
    return s


def test_add_then_find_returns_record_unchanged():
    s = InMemoryRecordStore[Item]("Item")
    item = Item("Apple", 1.0)
    s.add(item)
    assert list(s.find_all(field_equals("name", "Apple"))) == [item]


def test_add_rejects_blank_key():
    s = InMemoryRecordStore[Item]("Item")
    with pytest.raises(ValidationError):
        s.add(Item("  ", 1.0))
    assert len(s) == 0


def test_find_all_without_predicate_keeps_insertion_order(store):
    assert [i.name for i in store.find_all()] == ["Apple", "Bread", "Cherry"]


def test_find_all_is_a_snapshot(store):
    results = store.find_all()
    store.add(Item("Date", 4.0))
    assert len(list(results)) == 3


def test_get_by_key_is_caseless_and_first_match(store):
    store.add(Item("apple", 9.0))
    assert store.get_by_key("APPLE").price == 1.0


def test_get_by_key_missing_returns_none(store):
    assert store.get_by_key("Durian") is None


def test_aggregate_with_predicate(store):
    assert store.aggregate(lambda i: i.price, total, field_equals("tag", "FRUIT")) == 4.0


def test_aggregate_average_of_nothing_is_zero():
    s = InMemoryRecordStore[Item]("Item")
    assert s.aggregate(lambda i: i.price, average) == 0


def test_update_moves_record_to_end(store):
    updated = store.update_by_key("apple", lambda old: replace(old, price=1.5))
    assert updated.price == 1.5
    assert [i.name for i in store.list_records()] == ["Bread", "Cherry", "Apple"]


def test_update_keep_position(store):
    store.update_by_key("Bread", lambda old: replace(old, price=9.9), keep_position=True)
    assert [i.name for i in store.list_records()] == ["Apple", "Bread", "Cherry"]
    assert store.get_by_key("Bread").price == 9.9


def test_update_missing_key_leaves_collection_unmodified(store):
    before = store.list_records()
    assert store.update_by_key("Durian", lambda old: replace(old, price=0)) is None
    assert store.list_records() == before


def test_update_factory_error_changes_nothing(store):
    before = store.list_records()

    def boom(old):
        raise ValueError("bad")

    with pytest.raises(ValueError):
        store.update_by_key("Apple", boom)
    assert store.list_records() == before


def test_delete_removes_first_match_only(store):
    store.add(Item("Apple", 7.0))
    removed = store.delete_by_key("Apple")
    assert removed.price == 1.0
    assert store.get_by_key("Apple").price == 7.0


def test_delete_missing_returns_none(store):
    assert store.delete_by_key("Durian") is None
    assert len(store) == 3


def test_list_records_returns_a_copy(store):
    records = store.list_records()
    records.clear()
    assert len(store) == 3


def test_sorted_by_does_not_reorder_store(store):
    assert [i.name for i in store.sorted_by(lambda i: -i.price)] == ["Cherry", "Bread", "Apple"]
    assert [i.name for i in store.list_records()] == ["Apple", "Bread", "Cherry"]


def test_custom_key_function():
    s = InMemoryRecordStore[Item]("Item", key=lambda i: (i.tag, i.name))
    s.add(Item("Apple", 1.0, "fruit"))
    assert s.get_by_key(("FRUIT", "apple")) is not None
    assert s.index_of(("fruit", "Apple")) == 0


def test_clear(store):
    store.clear()
    assert len(store) == 0
    assert list(store.find_all(field_contains("name", "a"))) == []


def test_save_without_codec_raises(store, tmp_path):
    with pytest.raises(TypeError):
        store.save_to_file(tmp_path / "items.txt")
