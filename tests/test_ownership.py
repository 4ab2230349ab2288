import pytest
from kitties_core.ownership import OwnedKitties
from kitties_core.storage.models import KittyLinkedItem

# CMD Line Usage: pytest -v tests/test_ownership.py


def test_read_missing_link_is_empty_node(storage):
    owned = OwnedKitties(storage)
    assert owned.read("alice", 7) == KittyLinkedItem(prev=None, next=None)
    assert owned.read_head("alice") == KittyLinkedItem()


def test_append_orders_most_recent_first(storage):
    owned = OwnedKitties(storage)
    for kitty_id in (1, 2, 3):
        owned.append("alice", kitty_id)

    assert owned.kitties_of("alice") == [3, 2, 1]
    assert owned.kitties_of("alice", newest_first=False) == [1, 2, 3]


def test_link_layout_after_appends(storage):
    owned = OwnedKitties(storage)
    for kitty_id in (1, 2, 3):
        owned.append("alice", kitty_id)

    assert owned.read_head("alice") == KittyLinkedItem(prev=3, next=1)
    assert owned.read("alice", 1) == KittyLinkedItem(prev=None, next=2)
    assert owned.read("alice", 2) == KittyLinkedItem(prev=1, next=3)
    assert owned.read("alice", 3) == KittyLinkedItem(prev=2, next=None)


def test_remove_interior_node(storage):
    owned = OwnedKitties(storage)
    for kitty_id in (1, 2, 3):
        owned.append("alice", kitty_id)

    owned.remove("alice", 2)

    assert owned.kitties_of("alice") == [3, 1]
    assert owned.kitties_of("alice", newest_first=False) == [1, 3]
    assert not owned.contains("alice", 2)


def test_remove_newest_and_oldest(storage):
    owned = OwnedKitties(storage)
    for kitty_id in (1, 2, 3):
        owned.append("alice", kitty_id)

    owned.remove("alice", 3)
    assert owned.kitties_of("alice") == [2, 1]

    owned.remove("alice", 1)
    assert owned.kitties_of("alice") == [2]
    assert owned.read_head("alice") == KittyLinkedItem(prev=2, next=2)

    owned.remove("alice", 2)
    assert owned.kitties_of("alice") == []
    assert owned.read_head("alice") == KittyLinkedItem(prev=None, next=None)


def test_append_then_remove_restores_list(storage):
    owned = OwnedKitties(storage)
    owned.append("alice", 0)
    owned.append("alice", 5)
    before = owned.kitties_of("alice")

    owned.append("alice", 9)
    owned.remove("alice", 9)

    assert owned.kitties_of("alice") == before
    assert owned.kitties_of("alice", newest_first=False) == list(reversed(before))


def test_remove_absent_is_noop(storage):
    owned = OwnedKitties(storage)
    owned.append("alice", 1)

    owned.remove("alice", 42)
    owned.remove("bob", 1)

    assert owned.kitties_of("alice") == [1]
    assert owned.kitties_of("bob") == []


def test_owners_are_independent(storage):
    owned = OwnedKitties(storage)
    owned.append("alice", 1)
    owned.append("bob", 2)
    owned.append("alice", 3)

    owned.remove("alice", 1)

    assert owned.kitties_of("alice") == [3]
    assert owned.kitties_of("bob") == [2]
    assert owned.contains("bob", 2)
    assert not owned.contains("alice", 2)


def test_kitty_zero_is_a_real_node(storage):
    owned = OwnedKitties(storage)
    owned.append("alice", 0)
    owned.append("alice", 1)

    assert owned.kitties_of("alice") == [1, 0]
    owned.remove("alice", 1)
    assert owned.kitties_of("alice") == [0]


def test_append_and_remove_refuse_sentinel_keys(storage):
    owned = OwnedKitties(storage)
    owned.append("alice", 1)

    for bad_key in (None, -1, True):
        with pytest.raises(ValueError):
            owned.append("alice", bad_key)
        with pytest.raises(ValueError):
            owned.remove("alice", bad_key)
        assert not owned.contains("alice", bad_key)

    assert owned.kitties_of("alice") == [1]
