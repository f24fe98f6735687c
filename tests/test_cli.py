import pytest

from arrayalgos.cli import main
from arrayalgos.intervals import merge_intervals
from arrayalgos.pascal import pascal_triangle
from arrayalgos.repeat_missing import find_repeating_missing
from arrayalgos.stock import max_profit
from arrayalgos.subarray import kadane, max_suffix_sum


def _run(capsys, argv):
    status = main(argv)
    captured = capsys.readouterr()
    return status, captured.out.splitlines(), captured.err


def test_repeat_missing_output(capsys):
    numbers = [3, 1, 2, 5, 3]
    status, lines, _ = _run(capsys, ["repeat-missing", *map(str, numbers)])
    repeating, missing = find_repeating_missing(numbers)
    assert status == 0
    assert lines == [
        f"The repeating number A is: {repeating}",
        f"The missing number B is: {missing}",
    ]


def test_repeat_missing_math_agrees(capsys):
    numbers = [3, 1, 2, 5, 3]
    _, counted, _ = _run(capsys, ["repeat-missing", *map(str, numbers)])
    status, mathematical, _ = _run(
        capsys, ["repeat-missing", "--math", *map(str, numbers)]
    )
    assert status == 0
    assert mathematical == counted


def test_repeat_missing_math_without_pair_fails(capsys):
    status, lines, err = _run(capsys, ["repeat-missing", "--math", "1", "2", "3"])
    assert status == 1
    assert lines == []
    assert err.startswith("error:")


def test_max_subarray_output(capsys):
    numbers = [-2, 1, -3, 4, -1, 2, 1, -5, 4]
    status, lines, _ = _run(capsys, ["max-subarray", *map(str, numbers)])
    best = kadane(numbers)
    body = "".join(f" {v} " for v in best.elements(numbers))
    assert status == 0
    assert lines == [
        f"Maximum subarray sum is: {best.total}",
        f"Subarray with maximum sum is: [{body}]",
    ]


def test_max_subarray_suffix(capsys):
    numbers = [2, -1, 3, -4]
    status, lines, _ = _run(capsys, ["max-subarray", "--suffix", *map(str, numbers)])
    assert status == 0
    assert lines == [f"Maximum subarray sum is: {max_suffix_sum(numbers)}"]


def test_merge_intervals_output(capsys):
    bounds = [1, 3, 2, 6, 8, 10, 15, 18]
    status, lines, _ = _run(capsys, ["merge-intervals", *map(str, bounds)])
    merged = merge_intervals([(1, 3), (2, 6), (8, 10), (15, 18)])
    expected = " ".join(f"[{a}, {b}]" for a, b in merged)
    assert status == 0
    assert lines == [f"Merged Intervals: {expected}"]


def test_merge_intervals_odd_bounds_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["merge-intervals", "1", "2", "3"])
    assert excinfo.value.code == 2


def test_pascal_output(capsys):
    status, lines, _ = _run(capsys, ["pascal", "5"])
    rows = pascal_triangle(5)
    assert status == 0
    assert lines[0] == "Pascal's Triangle:"
    assert lines[1:] == [" ".join(map(str, row)) for row in rows]


def test_pascal_negative_rows_fails(capsys):
    status, _, err = _run(capsys, ["pascal", "-1"])
    assert status == 1
    assert "negative" in err


def test_stock_output(capsys):
    prices = [7, 1, 5, 3, 6, 4]
    status, lines, _ = _run(capsys, ["stock", *map(str, prices)])
    assert status == 0
    assert lines == [f"Maximum profit that can be achieved: {max_profit(prices)}"]


def test_missing_command_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_non_integer_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["stock", "abc"])
    assert excinfo.value.code == 2