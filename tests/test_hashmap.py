import itertools
import string

import pytest

from graphquest.hashmap import HashMap, hash_key


def _colliding_keys(capacity, count):
    groups = {}
    for a, b in itertools.product(string.ascii_lowercase, repeat=2):
        key = a + b
        groups.setdefault(hash_key(key, capacity), []).append(key)
        for keys in groups.values():
            if len(keys) >= count:
                return keys[:count]
    raise AssertionError("no colliding keys found")


def test_hash_of_single_letter_is_its_code():
    assert hash_key("a", 1000) == ord("a")


def test_hash_of_empty_key_is_zero():
    assert hash_key("", 7) == 0


def test_hash_ignores_letter_case():
    for capacity in (7, 20, 1024):
        assert hash_key("Sala Grande", capacity) == hash_key("sala grande", capacity)


def test_hash_is_within_capacity():
    for key in ("1", "abc", "ñandú", "Z" * 50):
        assert 0 <= hash_key(key, 13) < 13


def test_insert_and_search():
    table = HashMap(20)
    table.insert("1", "Entrada")
    pair = table.search("1")
    assert pair.key == "1"
    assert pair.value == "Entrada"
    assert len(table) == 1


def test_search_missing_returns_none():
    table = HashMap(20)
    table.insert("1", "x")
    assert table.search("2") is None
    assert "2" not in table
    assert "1" in table


def test_duplicate_insert_keeps_first_value():
    table = HashMap(5)
    table.insert("k", "first")
    table.insert("k", "second")
    assert table.search("k").value == "first"
    assert len(table) == 1


def test_keys_are_case_sensitive():
    table = HashMap(10)
    table.insert("Key", 1)
    assert table.search("key") is None


def test_erase_removes_key():
    table = HashMap(10)
    table.insert("a", 1)
    table.insert("b", 2)
    table.erase("a")
    assert "a" not in table
    assert table.search("b").value == 2
    assert len(table) == 1


def test_erase_missing_key_is_harmless():
    table = HashMap(10)
    table.insert("a", 1)
    table.erase("zz")
    assert len(table) == 1
    assert list(table) == ["a"]


def test_probe_passes_erased_slot():
    first, second = _colliding_keys(8, 2)
    table = HashMap(8)
    table.insert(first, 1)
    table.insert(second, 2)
    table.erase(first)
    assert table.search(second).value == 2
    assert first not in table


def test_table_grows_when_full():
    table = HashMap(2)
    for index, key in enumerate(["a", "b", "c", "d", "e"]):
        table.insert(key, index)
    assert table.capacity == 8
    assert len(table) == 5
    assert {pair.key: pair.value for pair in table.items()} == {
        "a": 0,
        "b": 1,
        "c": 2,
        "d": 3,
        "e": 4,
    }


def test_insert_after_erase_markers_fill_table():
    table = HashMap(2)
    table.insert("a", 1)
    table.erase("a")
    table.insert("b", 2)
    table.erase("b")
    table.insert("c", 3)
    assert table.search("c").value == 3
    assert len(table) == 1


def test_items_follow_bucket_order():
    table = HashMap(64)
    keys = ["1", "2", "3", "4", "5"]
    for key in keys:
        table.insert(key, key)
    indices = {hash_key(key, 64) for key in keys}
    assert len(indices) == len(keys)
    assert list(table) == sorted(keys, key=lambda k: hash_key(k, 64))


def test_iteration_matches_items():
    table = HashMap(20)
    for key in ("x", "y", "z"):
        table.insert(key, key.upper())
    assert list(table) == [pair.key for pair in table.items()]
    assert sorted(pair.value for pair in table.items()) == ["X", "Y", "Z"]


@pytest.mark.parametrize("capacity", [0, -3])
def test_capacity_must_be_positive(capacity):
    with pytest.raises(ValueError):
        HashMap(capacity)