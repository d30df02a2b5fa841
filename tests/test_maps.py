import pytest

from xtlo.maps import (
    Entry,
    assign,
    chunk_entries,
    entries,
    filter_map_to_slice,
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


class MyMap(dict):
    pass


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
    r1 = pick_by({"foo": 1, "bar": 2, "baz": 3}, lambda k, v: v % 2 == 1)
    assert r1 == {"foo": 1, "baz": 3}

    before = MyMap({"": 0, "foobar": 6, "baz": 3})
    after = pick_by(before, lambda k, v: True)
    assert type(after) is MyMap
    assert after == before


def test_pick_by_keys():
    r1 = pick_by_keys({"foo": 1, "bar": 2, "baz": 3}, ["foo", "baz", "qux"])
    assert r1 == {"foo": 1, "baz": 3}

    before = MyMap({"": 0, "foobar": 6, "baz": 3})
    after = pick_by_keys(before, ["foobar", "baz"])
    assert type(after) is MyMap
    assert after == {"foobar": 6, "baz": 3}


def test_pick_by_values():
    r1 = pick_by_values({"foo": 1, "bar": 2, "baz": 3}, [1, 3])
    assert r1 == {"foo": 1, "baz": 3}

    before = MyMap({"": 0, "foobar": 6, "baz": 3})
    after = pick_by_values(before, [0, 3])
    assert type(after) is MyMap
    assert after == {"": 0, "baz": 3}


def test_omit_by():
    r1 = omit_by({"foo": 1, "bar": 2, "baz": 3}, lambda k, v: v % 2 == 1)
    assert r1 == {"bar": 2}

    before = MyMap({"": 0, "foobar": 6, "baz": 3})
    after = omit_by(before, lambda k, v: False)
    assert type(after) is MyMap
    assert after == before


def test_omit_by_keys():
    r1 = omit_by_keys({"foo": 1, "bar": 2, "baz": 3}, ["foo", "baz", "qux"])
    assert r1 == {"bar": 2}

    before = MyMap({"": 0, "foobar": 6, "baz": 3})
    after = omit_by_keys(before, ["foobar", "baz"])
    assert type(after) is MyMap
    assert after == {"": 0}


def test_omit_by_values():
    r1 = omit_by_values({"foo": 1, "bar": 2, "baz": 3}, [1, 3])
    assert r1 == {"bar": 2}

    before = MyMap({"": 0, "foobar": 6, "baz": 3})
    after = omit_by_values(before, [0, 3])
    assert type(after) is MyMap
    assert after == {"foobar": 6}


def test_entries():
    r1 = sorted(entries({"foo": 1, "bar": 2}), key=lambda e: e.value)
    assert r1 == [Entry("foo", 1), Entry("bar", 2)]


def test_to_pairs():
    r1 = sorted(to_pairs({"baz": 3, "qux": 4}), key=lambda e: e.value)
    assert r1 == [Entry("baz", 3), Entry("qux", 4)]


def test_from_entries():
    r1 = from_entries([Entry("foo", 1), Entry("bar", 2)])
    assert len(r1) == 2
    assert r1["foo"] == 1
    assert r1["bar"] == 2


def test_from_pairs():
    r1 = from_pairs([Entry("baz", 3), Entry("qux", 4)])
    assert len(r1) == 2
    assert r1["baz"] == 3
    assert r1["qux"] == 4


def test_entries_round_trip():
    original = {"a": 1, "b": 2, "c": 3}
    assert from_entries(entries(original)) == original


def test_invert():
    r1 = invert({"a": 1, "b": 2})
    r2 = invert({"a": 1, "b": 2, "c": 1})
    assert r1 == {1: "a", 2: "b"}
    assert len(r2) == 2


def test_assign():
    result1 = assign({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert len(result1) == 3
    assert result1 == {"a": 1, "b": 3, "c": 4}

    before = MyMap({"": 0, "foobar": 6, "baz": 3})
    after = assign(before, before)
    assert type(after) is MyMap
    assert after == before


def test_chunk_entries():
    five = {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}
    assert len(chunk_entries(five, 2)) == 3
    assert len(chunk_entries(five, 3)) == 2
    assert len(chunk_entries({}, 2)) == 0
    assert len(chunk_entries({"a": 1}, 2)) == 1
    assert len(chunk_entries({"a": 1, "b": 2}, 1)) == 2

    with pytest.raises(ValueError, match="The chunk size must be greater than 0"):
        chunk_entries({"a": 1}, 0)
    with pytest.raises(ValueError, match="The chunk size must be greater than 0"):
        chunk_entries({"a": 1}, -1)

    structs = {"a": ("one", 1), "b": ("two", 2), "c": ("three", 3)}
    assert len(chunk_entries(structs, 2)) == 2

    original = {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}
    result6 = chunk_entries(original, 2)
    for k in result6[0]:
        result6[0][k] = 10
    assert original == {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}


def test_chunk_entries_covers_all_entries():
    five = {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}
    merged = {}
    for chunk in chunk_entries(five, 2):
        assert len(chunk) <= 2
        merged.update(chunk)
    assert merged == five


def test_map_keys():
    source = {1: 1, 2: 2, 3: 3, 4: 4}
    result1 = map_keys(source, lambda v, k: "Hello")
    result2 = map_keys(source, lambda v, k: str(v))
    assert len(result1) == 1
    assert len(result2) == 4
    assert result2 == {"1": 1, "2": 2, "3": 3, "4": 4}


def test_map_values():
    source = {1: 1, 2: 2, 3: 3, 4: 4}
    result1 = map_values(source, lambda v, k: "Hello")
    result2 = map_values(source, lambda v, k: str(v))
    assert result1 == {1: "Hello", 2: "Hello", 3: "Hello", 4: "Hello"}
    assert result2 == {1: "1", 2: "2", 3: "3", 4: "4"}


@pytest.mark.parametrize(
    "source, iteratee, expected",
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
        (
            {"1-11-1": {"name": "foo", "age": 1}, "2-22-2": {"name": "bar", "age": 2}},
            lambda k, v: (v["name"], k),
            {"bar": "2-22-2", "foo": "1-11-1"},
        ),
    ],
)
def test_map_entries(source, iteratee, expected):
    assert map_entries(source, iteratee) == expected


def test_map_entries_does_not_mutate():
    r1 = {"foo": 1, "bar": 2}
    result = map_entries(r1, lambda k, v: (k, str(v) + "!!"))
    assert result == {"foo": "1!!", "bar": "2!!"}
    assert r1 == {"foo": 1, "bar": 2}


def test_map_to_slice():
    source = {1: 5, 2: 6, 3: 7, 4: 8}
    result1 = map_to_slice(source, lambda k, v: f"{k}_{v}")
    result2 = map_to_slice(source, lambda k, v: str(k))
    assert sorted(result1) == ["1_5", "2_6", "3_7", "4_8"]
    assert sorted(result2) == ["1", "2", "3", "4"]


def test_filter_map_to_slice():
    source = {1: 5, 2: 6, 3: 7, 4: 8}
    result1 = filter_map_to_slice(source, lambda k, v: (f"{k}_{v}", k % 2 == 0))
    result2 = filter_map_to_slice(source, lambda k, v: (str(k), k % 2 == 0))
    assert sorted(result1) == ["2_6", "4_8"]
    assert sorted(result2) == ["2", "4"]