import pytest

from algoshelf.hashtable import ChainedHashTable


def test_insert_and_get():
    table = ChainedHashTable()
    table.insert(3, "three")
    table.insert(4, "four")
    assert table.get(3) == "three"
    assert table.get(4) == "four"
    assert table.get(5) is None
    assert len(table) == 2


def test_default_capacity():
    assert ChainedHashTable().capacity == 10


def test_insert_existing_key_updates_value():
    table = ChainedHashTable()
    table.insert(7, "a")
    table.insert(7, "b")
    assert table.get(7) == "b"
    assert len(table) == 1


def test_colliding_keys_chain_in_insertion_order():
    table = ChainedHashTable(10)
    table.insert(1, "a")
    table.insert(11, "b")
    table.insert(21, "c")
    assert table.buckets()[1] == [(1, "a"), (11, "b"), (21, "c")]


def test_rehash_doubles_capacity_at_load_factor():
    table = ChainedHashTable(4)
    table.insert(0, "x")
    table.insert(1, "y")
    assert table.capacity == 4
    table.insert(2, "z")
    assert table.capacity == 2 * 4
    assert len(table) == 3
    assert [table.get(key) for key in (0, 1, 2)] == ["x", "y", "z"]


def test_every_key_lives_in_its_bucket_after_growth():
    table = ChainedHashTable(10)
    keys = list(range(0, 200, 7))
    for key in keys:
        table.insert(key, key * 2)
    assert len(table) == len(keys)
    assert len(table) / table.capacity < ChainedHashTable.LOAD_FACTOR
    for index, bucket in enumerate(table.buckets()):
        for key, value in bucket:
            assert key % table.capacity == index
            assert value == key * 2
    assert sorted(key for bucket in table.buckets() for key, _ in bucket) == keys


def test_remove_returns_value_and_shrinks():
    table = ChainedHashTable()
    table.insert(2, "b")
    table.insert(12, "c")
    assert table.remove(2) == "b"
    assert 2 not in table
    assert 12 in table
    assert len(table) == 1
    assert table.buckets()[2] == [(12, "c")]


def test_remove_tail_of_chain():
    table = ChainedHashTable()
    table.insert(5, "a")
    table.insert(15, "b")
    assert table.remove(15) == "b"
    table.insert(25, "c")
    assert table.buckets()[5] == [(5, "a"), (25, "c")]


def test_remove_missing_raises_key_error():
    table = ChainedHashTable()
    with pytest.raises(KeyError):
        table.remove(1)
    table.insert(1, "a")
    with pytest.raises(KeyError):
        table.remove(11)


def test_contains():
    table = ChainedHashTable()
    table.insert(9, None)
    assert 9 in table
    assert 19 not in table
    assert "9" not in table


@pytest.mark.parametrize("capacity", [0, -3])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        ChainedHashTable(capacity)