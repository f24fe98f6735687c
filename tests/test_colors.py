from hypothesis import given, strategies as st

from arrayalgos.colors import sort_colors


def test_source_example():
    nums = [0, 2, 1, 2, 0, 1]
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected


def test_empty():
    nums = []
    sort_colors(nums)
    assert nums == []


@given(st.lists(st.sampled_from([0, 1, 2]), max_size=60))
def test_sorts_any_mix(nums):
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected