from hypothesis import given, strategies as st

from arrayalgos.merge_sorted import merge_sorted_arrays

_sorted_lists = st.lists(st.integers(min_value=-100, max_value=100), max_size=25).map(
    sorted
)


def test_source_example():
    first = [1, 4, 8, 10]
    second = [2, 3, 9]
    combined = sorted(first + second)
    merge_sorted_arrays(first, second)
    assert first == combined[:4]
    assert second == combined[4:]


def test_empty_second_list():
    first = [1, 2, 3]
    second = []
    merge_sorted_arrays(first, second)
    assert (first, second) == ([1, 2, 3], [])


@given(_sorted_lists, _sorted_lists)
def test_merge_splits_sorted_union(first, second):
    combined = sorted(first + second)
    size = len(first)
    merge_sorted_arrays(first, second)
    assert len(first) == size
    assert first + second == combined