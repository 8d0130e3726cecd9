import math
import statistics

import pytest

from kalkulator_smp.statistika import (
    NO_MODE,
    Statistics,
    StatisticsError,
    compute_statistics,
    count_entries,
    modes,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("5, 7, 3, 9, 5", 5),
        ("1,,2", 2),
        ("1, ,2", 2),
        ("  4  ", 1),
    ],
)
def test_count_entries(text, expected):
    assert count_entries(text) == expected


def test_modes_single_most_frequent():
    assert modes([5, 7, 3, 9, 5]) == (5,)


def test_modes_all_equal_frequency_has_no_mode():
    assert modes([1, 2, 3]) == ()


def test_modes_all_same_value_is_mode():
    assert modes([4, 4, 4]) == (4,)


def test_modes_ties_sorted():
    assert modes([9, 9, 2, 2, 5]) == (2, 9)


def test_modes_empty():
    assert modes([]) == ()


def test_compute_matches_reference_statistics():
    data = [5, 7, 3, 9, 5]
    result = compute_statistics("5, 7, 3, 9, 5")
    assert isinstance(result, Statistics)
    assert result.values == tuple(float(v) for v in data)
    assert result.count == len(data)
    assert math.isclose(result.mean, statistics.mean(data))
    assert math.isclose(result.median, statistics.median(data))
    assert math.isclose(result.variance, statistics.pvariance(data))
    assert math.isclose(result.std_dev, statistics.pstdev(data))
    assert result.range == max(data) - min(data)
    assert result.modes == (5,)
    assert result.mode_text == "5"
    assert result.missing_value is None


def test_even_count_median_and_sorted_values():
    data = [4, 1, 3, 2]
    result = compute_statistics("4,1,3,2")
    assert result.sorted_values == (1.0, 2.0, 3.0, 4.0)
    assert math.isclose(result.median, statistics.median(data))


def test_no_mode_text():
    result = compute_statistics("1, 2, 3")
    assert result.modes == ()
    assert result.mode_text == NO_MODE


def test_missing_value_found_from_known_mean():
    result = compute_statistics("2, ?, 4, 10", known_mean=5)
    assert math.isclose(result.mean, 5)
    assert result.missing_value is not None
    assert math.isclose(result.values[1], result.missing_value)
    assert result.count == 4


def test_known_mean_ignored_without_question_mark():
    with_mean = compute_statistics("1, 2, 6", known_mean=100)
    without = compute_statistics("1, 2, 6")
    assert with_mean == without


def test_empty_data_raises():
    with pytest.raises(StatisticsError, match="Data kosong."):
        compute_statistics("   ")


def test_two_question_marks_raise():
    with pytest.raises(StatisticsError, match="Hanya boleh ada 1 tanda"):
        compute_statistics("?, 2, ?", known_mean=3)


def test_question_mark_without_mean_raises():
    with pytest.raises(StatisticsError, match="belum diisi"):
        compute_statistics("1, ?, 3")


def test_too_few_values_raise():
    with pytest.raises(StatisticsError, match="minimal 2 data"):
        compute_statistics("7")


def test_invalid_entry_raises():
    with pytest.raises(StatisticsError):
        compute_statistics("1, abc, 3")


def test_blank_entry_raises():
    with pytest.raises(StatisticsError):
        compute_statistics("1, ,3")


def test_invalid_entry_raises_while_solving_missing():
    with pytest.raises(StatisticsError):
        compute_statistics("1, ?, x", known_mean=2)


def test_empty_segments_are_skipped():
    assert compute_statistics("1,,3") == compute_statistics("1,3")