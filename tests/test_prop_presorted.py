from __future__ import annotations

from collections import defaultdict

import hypothesis.strategies as st
from hypothesis import given

from presorted import PresortedList, get_by_key, is_presorted, merge, presort, put
from tests.conftest import Log, Thing

things = st.builds(Thing, st.integers(-50, 50), st.floats(-1e6, 1e6, allow_nan=False))
logs = st.builds(Log, st.sampled_from("abcdefgh"), st.tuples(st.text(max_size=3)))


def _fold_by_key(elements: list[Log]) -> dict[str, tuple[str, ...]]:
    expected: dict[str, tuple[str, ...]] = defaultdict(tuple)
    for element in elements:
        expected[element.name] += element.entries
    return expected


@given(st.lists(things), st.lists(things))
def test_h_merge_is_presorted(v: list[Thing], w: list[Thing]) -> None:
    v = presort(v)
    w = presort(w)
    merge(v, w)
    assert is_presorted(v)


@given(st.lists(things))
def test_h_put_keeps_keys_sorted_and_unique(elements: list[Thing]) -> None:
    v: list[Thing] = []
    for element in elements:
        put(v, element)
        assert is_presorted(v)
    assert [x.key() for x in v] == sorted({x.key() for x in elements})


@given(st.lists(logs))
def test_h_lookup_returns_fold_in_insertion_order(elements: list[Log]) -> None:
    v: list[Log] = []
    for element in elements:
        put(v, element)
    expected = _fold_by_key(elements)
    for name in "abcdefgh":
        found = get_by_key(v, name)
        if name in expected:
            assert found == Log(name, expected[name])
        else:
            assert found is None


@given(st.lists(logs), st.lists(logs))
def test_h_merge_matches_repeated_put(first: list[Log], second: list[Log]) -> None:
    merged = presort(first)
    merge(merged, presort(second))
    v: list[Log] = []
    for element in first + second:
        put(v, element)
    assert merged == v


@given(st.lists(logs), st.lists(logs), st.lists(logs))
def test_h_merge_grouping_is_irrelevant(a: list[Log], b: list[Log], c: list[Log]) -> None:
    left = PresortedList(a)
    left.merge(PresortedList(b))
    left.merge(PresortedList(c))
    right = PresortedList(b)
    right.merge(PresortedList(c))
    result = PresortedList(a)
    result.merge(right)
    assert left == result


@given(st.sets(st.integers(-100, 100)), st.sets(st.integers(-100, 100)))
def test_h_merge_disjoint_keys_keeps_elements(v_keys: set[int], w_keys: set[int]) -> None:
    w_keys -= v_keys
    v = PresortedList(Thing(k, float(k)) for k in v_keys)
    w = PresortedList(Thing(k, -float(k)) for k in w_keys)
    v.merge(w)
    assert list(v.keys()) == sorted(v_keys | w_keys)
    for k in v_keys:
        assert v.get_by_key(k) == Thing(k, float(k))
    for k in w_keys:
        assert v.get_by_key(k) == Thing(k, -float(k))


@given(st.lists(logs), st.lists(logs))
def test_h_update_matches_repeated_put(initial: list[Log], added: list[Log]) -> None:
    bulk = PresortedList(initial)
    bulk.update(added)
    single = PresortedList(initial)
    for element in added:
        single.put(element)
    assert bulk == single


operations = st.lists(
    st.one_of(
        st.tuples(st.just("put"), logs),
        st.tuples(st.just("merge"), st.lists(logs).map(presort)),
    )
)


@given(operations)
def test_h_mixed_put_and_merge_stay_presorted(steps: list[tuple[str, object]]) -> None:
    v: list[Log] = []
    inserted: list[Log] = []
    for name, argument in steps:
        if name == "put":
            put(v, argument)
            inserted.append(argument)
        else:
            merge(v, argument)
            inserted.extend(argument)
        assert is_presorted(v)
    expected = _fold_by_key(inserted)
    assert {x.name: x.entries for x in v} == expected
