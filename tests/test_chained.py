import pytest

from arborlib.chained import ChainedHashtable, Stream


def _identity(value):
    return value


def test_zero_size_table_rejected():
    with pytest.raises(ValueError):
        ChainedHashtable(0, _identity)


def test_insert_returns_element():
    table = ChainedHashtable(4, _identity)
    assert table.insert(7) == 7


def test_colliding_elements_chain_in_insertion_order():
    table = ChainedHashtable(4, _identity)
    for value in (1, 5, 9):
        table.insert(value)
    assert table.bucket(1) == [1, 5, 9]
    assert table.first_at_bucket(1) == 1


def test_bucket_lookup_wraps_hash_by_size():
    table = ChainedHashtable(4, _identity)
    table.insert(3)
    assert table.bucket(7) == table.bucket(3) == [3]


def test_duplicates_are_kept():
    table = ChainedHashtable(8, _identity)
    table.insert(2)
    table.insert(2)
    assert table.bucket(2) == [2, 2]
    assert len(table) == 2


def test_first_at_empty_bucket_raises():
    table = ChainedHashtable(4, _identity)
    table.insert(1)
    with pytest.raises(KeyError):
        table.first_at_bucket(2)


def test_default_hash_places_strings_consistently():
    table = ChainedHashtable(16)
    table.insert("alpha")
    assert "alpha" in table.bucket(hash("alpha"))
    assert table.first_at_bucket(hash("alpha")) == "alpha"


def test_bucket_returns_copy():
    table = ChainedHashtable(2, _identity)
    table.insert(0)
    chain = table.bucket(0)
    chain.append(99)
    assert table.bucket(0) == [0]


def test_iteration_covers_all_elements():
    table = ChainedHashtable(3, _identity)
    values = [0, 1, 2, 3, 4, 5, 6]
    for value in values:
        table.insert(value)
    assert sorted(table) == values
    assert len(table) == len(values)


def test_stream_push_preserves_order():
    stream = Stream()
    for value in ("a", "b", "c"):
        assert stream.push(value) == value
    assert list(stream) == ["a", "b", "c"]
    assert len(stream) == 3


def test_stream_compact_empties_stream():
    stream = Stream()
    stream.push(10)
    stream.push(20)
    assert stream.compact() == [10, 20]
    assert len(stream) == 0
    assert stream.compact() == []


def test_stream_clear():
    stream = Stream()
    stream.push(1)
    stream.clear()
    assert list(stream) == []
    stream.push(2)
    assert list(stream) == [2]


def test_empty_stream_compacts_to_empty_list():
    assert Stream().compact() == []