"""Tests for the in-memory collection store."""

import pytest

from travel_guide_api.app.core.store import Collection, CollectionStore, ids_match
from travel_guide_api.app.schemas.user import User


@pytest.mark.parametrize(
    "record_id, raw_id, expected",
    [
        (1, "1", True),
        (1, "01", True),
        (1, "1.0", True),
        (1, 1, True),
        (1, "2", False),
        (1, "one", False),
        (1, "", False),
        (None, "1", False),
    ],
)
def test_ids_match(record_id, raw_id, expected):
    assert ids_match(record_id, raw_id) is expected


def test_seeded_store():
    store = CollectionStore.seeded()
    assert len(store.destinations) == 3
    assert len(store.users) == 2
    assert len(store.comments) == 2


def test_empty_store():
    store = CollectionStore()
    assert store.destinations.all() == []
    assert store.users.find("1") is None


def test_add_assigns_length_plus_one():
    users = Collection("user")
    first = users.add(lambda new_id: User(id=new_id, username="a"))
    second = users.add(lambda new_id: User(id=new_id, username="b"))
    assert (first.id, second.id) == (1, 2)


def test_remove_shifts_positions_and_allows_duplicate_ids():
    users = Collection("user", [User(id=1), User(id=2), User(id=3)])
    removed = users.remove("1")
    assert removed.id == 1
    assert users.index_of("3") == 1
    users.add(lambda new_id: User(id=new_id))
    assert [u.id for u in users.all()] == [2, 3, 3]


def test_remove_missing_returns_none():
    users = Collection("user", [User(id=1)])
    assert users.remove("5") is None
    assert len(users) == 1


def test_find_returns_stored_object():
    store = CollectionStore.seeded()
    user = store.users.find("1")
    user.username = "changed"
    assert store.users.find(1).username == "changed"
