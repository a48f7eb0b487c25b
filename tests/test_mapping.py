from collections import OrderedDict, namedtuple

import pytest

from lotools.mapping import (
    assign,
    chunk_entries,
    entries,
    from_entries,
    from_pairs,
    has_key,
    invert,
    keys,
    map_entries,
    map_keys,
    map_to_slice,
    map_values,
    omit_by,
    omit_by_keys,
    omit_by_values,
    pick_by,
    pick_by_keys,
    pick_by_values,
    to_pairs,
    uniq_keys,
    uniq_values,
    value_or,
    values,
)


def test_keys():
    assert sorted(keys({"foo": 1, "bar": 2})) == ["bar", "foo"]
    assert keys({}) == []
    assert sorted(keys({"foo": 1, "bar": 2}, {"baz": 3})) == ["bar", "baz", "foo"]
    assert keys() == []
    assert sorted(keys({"foo": 1, "bar": 2}, {"bar": 3})) == ["bar", "bar", "foo"]


def test_uniq_keys():
    assert sorted(uniq_keys({"foo": 1, "bar": 2})) == ["bar", "foo"]
    assert uniq_keys({}) == []
    assert sorted(uniq_keys({"foo": 1, "bar": 2}, {"baz": 3})) == ["bar", "baz", "foo"]
    assert uniq_keys() == []
    assert sorted(uniq_keys({"foo": 1, "bar": 2}, {"foo": 1, "bar": 3})) == ["bar", "foo"]
    assert uniq_keys({"foo": 1}, {"bar": 3}) == ["foo", "bar"]


def test_has_key():
    assert has_key({"foo": 1}, "bar") is False
    assert has_key({"foo": 1}, "foo") is True


def test_values():
    assert sorted(values({"foo": 1, "bar": 2})) == [1, 2]
    assert values({}) == []
    assert sorted(values({"foo": 1, "bar": 2}, {"baz": 3})) == [1, 2, 3]
    assert values() == []
    assert sorted(values({"foo": 1, "bar": 2}, {"foo": 1, "bar": 3})) == [1, 1, 2, 3]


def test_uniq_values():
    assert sorted(uniq_values({"foo": 1, "bar": 2})) == [1, 2]
    assert uniq_values({}) == []
    assert sorted(uniq_values({"foo": 1, "bar": 2}, {"baz": 3})) == [1, 2, 3]
    assert uniq_values() == []
    assert sorted(uniq_values({"foo": 1, "bar": 2}, {"foo": 1, "bar": 3})) == [1, 2, 3]
    assert sorted(uniq_values({"foo": 1, "bar": 1}, {"foo": 1, "bar": 3})) == [1, 3]
    assert uniq_values({"foo": 1}, {"bar": 3}) == [1, 3]


def test_value_or():
    assert value_or({"foo": 1}, "bar", 2) == 2
    assert value_or({"foo": 1}, "foo", 2) == 1


def test_pick_by():
    result = pick_by({"foo": 1, "bar": 2, "baz": 3}, lambda k, v: v % 2 == 1)
    assert result == {"foo": 1, "baz": 3}


def test_pick_by_preserves_type():
    before = OrderedDict([("", 0), ("foobar", 6), ("baz", 3)])
    after = pick_by(before, lambda k, v: True)
    assert isinstance(after, OrderedDict)
    assert after == before


def test_pick_by_keys():
    result = pick_by_keys({"foo": 1, "bar": 2, "baz": 3}, ["foo", "baz", "qux"])
    assert result == {"foo": 1, "baz": 3}
    before = OrderedDict([("", 0), ("foobar", 6), ("baz", 3)])
    after = pick_by_keys(before, ["foobar", "baz"])
    assert isinstance(after, OrderedDict)
    assert after == {"foobar": 6, "baz": 3}


def test_pick_by_values():
    result = pick_by_values({"foo": 1, "bar": 2, "baz": 3}, [1, 3])
    assert result == {"foo": 1, "baz": 3}
    before = OrderedDict([("", 0), ("foobar", 6), ("baz", 3)])
    after = pick_by_values(before, [0, 3])
    assert isinstance(after, OrderedDict)
    assert after == {"": 0, "baz": 3}


def test_omit_by():
    result = omit_by({"foo": 1, "bar": 2, "baz": 3}, lambda k, v: v % 2 == 1)
    assert result == {"bar": 2}


def test_omit_by_keys():
    result = omit_by_keys({"foo": 1, "bar": 2, "baz": 3}, ["foo", "baz", "qux"])
    assert result == {"bar": 2}
    before = OrderedDict([("", 0), ("foobar", 6), ("baz", 3)])
    after = omit_by_keys(before, ["foobar", "baz"])
    assert isinstance(after, OrderedDict)
    assert after == {"": 0}
    assert before == {"": 0, "foobar": 6, "baz": 3}


def test_omit_by_values():
    result = omit_by_values({"foo": 1, "bar": 2, "baz": 3}, [1, 3])
    assert result == {"bar": 2}
    before = OrderedDict([("", 0), ("foobar", 6), ("baz", 3)])
    after = omit_by_values(before, [0, 3])
    assert isinstance(after, OrderedDict)
    assert after == {"foobar": 6}


def test_entries():
    result = sorted(entries({"foo": 1, "bar": 2}), key=lambda e: e[1])
    assert result == [("foo", 1), ("bar", 2)]


def test_to_pairs():
    result = sorted(to_pairs({"baz": 3, "qux": 4}), key=lambda e: e[1])
    assert result == [("baz", 3), ("qux", 4)]


def test_from_entries():
    result = from_entries([("foo", 1), ("bar", 2)])
    assert len(result) == 2
    assert result["foo"] == 1
    assert result["bar"] == 2


def test_from_pairs():
    result = from_pairs([("baz", 3), ("qux", 4)])
    assert len(result) == 2
    assert result["baz"] == 3
    assert result["qux"] == 4


def test_entries_round_trip():
    original = {"a": 1, "b": 2, "c": 3}
    assert from_entries(entries(original)) == original


def test_invert():
    r1 = invert({"a": 1, "b": 2})
    r2 = invert({"a": 1, "b": 2, "c": 1})
    assert r1 == {1: "a", 2: "b"}
    assert len(r2) == 2


def test_assign():
    result = assign({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert len(result) == 3
    assert result == {"a": 1, "b": 3, "c": 4}


def test_assign_preserves_type():
    before = OrderedDict([("", 0), ("foobar", 6), ("baz", 3)])
    after = assign(before, before)
    assert isinstance(after, OrderedDict)
    assert after == before


def test_chunk_entries():
    data = {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}
    assert len(chunk_entries(data, 2)) == 3
    assert len(chunk_entries(data, 3)) == 2
    assert len(chunk_entries({}, 2)) == 0
    assert len(chunk_entries({"a": 1}, 2)) == 1
    assert len(chunk_entries({"a": 1, "b": 2}, 1)) == 2


@pytest.mark.parametrize("size", [0, -1])
def test_chunk_entries_rejects_bad_size(size):
    with pytest.raises(ValueError, match="The chunk size must be greater than 0"):
        chunk_entries({"a": 1}, size)


def test_chunk_entries_structs_and_no_mutation():
    Item = namedtuple("Item", "name value")
    structs = {"a": Item("one", 1), "b": Item("two", 2), "c": Item("three", 3)}
    assert len(chunk_entries(structs, 2)) == 2

    original = {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}
    chunks = chunk_entries(original, 2)
    for key in chunks[0]:
        chunks[0][key] = 10
    assert original == {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}


def test_chunk_entries_covers_every_entry():
    data = {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}
    chunks = chunk_entries(data, 2)
    assert all(len(chunk) <= 2 for chunk in chunks)
    assert assign(*chunks) == data


def test_map_keys():
    result1 = map_keys({1: 1, 2: 2, 3: 3, 4: 4}, lambda x, _k: "Hello")
    result2 = map_keys({1: 1, 2: 2, 3: 3, 4: 4}, lambda _x, v: str(v))
    assert len(result1) == 1
    assert len(result2) == 4
    assert result2 == {"1": 1, "2": 2, "3": 3, "4": 4}


def test_map_values():
    result1 = map_values({1: 1, 2: 2, 3: 3, 4: 4}, lambda x, _k: "Hello")
    result2 = map_values({1: 1, 2: 2, 3: 3, 4: 4}, lambda x, _k: str(x))
    assert result1 == {1: "Hello", 2: "Hello", 3: "Hello", 4: "Hello"}
    assert result2 == {1: "1", 2: "2", 3: "3", 4: "4"}


@pytest.mark.parametrize(
    "data, iteratee, expected",
    [
        ({"foo": 1, "bar": 2}, lambda k, v: (k, v + 1), {"foo": 2, "bar": 3}),
        ({"foo": 1, "bar": 2}, lambda k, v: (k, k + str(v)), {"foo": "foo1", "bar": "bar2"}),
        ({"foo": 1, "bar": 2}, lambda k, v: (k, str(v) + k), {"foo": "1foo", "bar": "2bar"}),
        ({}, lambda k, v: (k, str(v) + "!!"), {}),
        ({"foo": 1, "bar": 2}, lambda k, v: (k, v), {"foo": 1, "bar": 2}),
        (
            {"foo": 1, "bar": "2", "ccc": True},
            lambda k, v: (k, v),
            {"foo": 1, "bar": "2", "ccc": True},
        ),
        ({"foo": 1, "bar": "2", "ccc": True}, lambda k, v: ("key", "value"), {"key": "value"}),
        ({"foo": 1, "bar": "2", "ccc": True}, lambda k, v: ("b", 5), {"b": 5}),
        (
            {"foo": "1", "foo2": "2", "Foo": "2", "Foo2": "2", "bar": "2", "ccc": "true"},
            lambda k, v: (k, k + v),
            {
                "Foo": "Foo2",
                "Foo2": "Foo22",
                "bar": "bar2",
                "ccc": "ccctrue",
                "foo": "foo1",
                "foo2": "foo22",
            },
        ),
    ],
)
def test_map_entries(data, iteratee, expected):
    assert map_entries(data, iteratee) == expected


def test_map_entries_with_records():
    Person = namedtuple("Person", "name age")
    data = {"1-11-1": Person("foo", 1), "2-22-2": Person("bar", 2)}
    result = map_entries(data, lambda k, v: (v.name, k))
    assert result == {"bar": "2-22-2", "foo": "1-11-1"}


def test_map_entries_does_not_mutate():
    original = {"foo": 1, "bar": 2}
    map_entries(original, lambda k, v: (k, str(v) + "!!"))
    assert original == {"foo": 1, "bar": 2}


def test_map_to_slice():
    result1 = map_to_slice({1: 5, 2: 6, 3: 7, 4: 8}, lambda k, v: f"{k}_{v}")
    result2 = map_to_slice({1: 5, 2: 6, 3: 7, 4: 8}, lambda k, _v: str(k))
    assert sorted(result1) == ["1_5", "2_6", "3_7", "4_8"]
    assert sorted(result2) == ["1", "2", "3", "4"]