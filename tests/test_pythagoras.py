import math

import pytest

from kalkulator_smp.pythagoras import (
    PythagorasError,
    PythagorasResult,
    pending_side,
    pythagorean_triple,
    solve_pythagoras,
)


def test_find_hypotenuse_of_3_4():
    result = solve_pythagoras(3.0, 4.0, None)
    assert result.missing == "c"
    assert result.c == pytest.approx(5.0)
    assert result.triple == (3, 4, 5)


@pytest.mark.parametrize(
    "a, b, c, missing",
    [
        (6.0, None, 10.0, "b"),
        (None, 12.0, 13.0, "a"),
        (2.0, 7.0, None, "c"),
        (None, 1.5, 4.25, "a"),
    ],
)
def test_solved_triangle_satisfies_theorem(a, b, c, missing):
    result = solve_pythagoras(a, b, c)
    assert result.missing == missing
    assert result.verified
    assert math.isclose(result.a ** 2 + result.b ** 2, result.c ** 2)
    assert math.isclose(result.answer ** 2, result.squared)


def test_given_sides_are_kept():
    result = solve_pythagoras(None, 8.0, 17.0)
    assert result.b == 8.0
    assert result.c == 17.0
    assert result.triple == (15, 8, 17)


def test_formula_and_question_follow_missing_side():
    assert solve_pythagoras(1.0, 1.0, None).formula == "c² = a² + b²"
    assert solve_pythagoras(1.0, None, 2.0).formula == "b² = c² - a²"
    assert solve_pythagoras(None, 1.0, 2.0).question == "Sisi tegak (a)"


def test_non_integer_triangle_has_no_triple():
    result = solve_pythagoras(1.0, 1.0, None)
    assert result.triple is None
    assert result.verified


def test_pythagorean_triple_checks_integers_and_identity():
    assert pythagorean_triple(5.0, 12.0, 13.0) == (5, 12, 13)
    assert pythagorean_triple(2.0, 3.0, 4.0) is None
    assert pythagorean_triple(1.0, 1.0, math.sqrt(2)) is None


def test_more_than_one_missing_side():
    with pytest.raises(PythagorasError, match="Saat ini 2 sisi kosong"):
        solve_pythagoras(3.0, None, None)


def test_no_missing_side():
    with pytest.raises(PythagorasError, match="Semua sisi terisi"):
        solve_pythagoras(3.0, 4.0, 5.0)


@pytest.mark.parametrize(
    "a, b, c, name",
    [(0.0, 4.0, None, "a"), (3.0, -1.0, None, "b"), (3.0, None, -5.0, "c")],
)
def test_non_positive_side(a, b, c, name):
    with pytest.raises(PythagorasError, match=f"Nilai {name} harus lebih dari 0"):
        solve_pythagoras(a, b, c)


def test_hypotenuse_not_longer_than_a():
    with pytest.raises(PythagorasError, match="c=5 <= a=5"):
        solve_pythagoras(5.0, None, 5.0)


def test_hypotenuse_not_longer_than_b():
    with pytest.raises(PythagorasError, match="c=3 <= b=7"):
        solve_pythagoras(None, 7.0, 3.0)


def test_result_answer_matches_field():
    result = PythagorasResult(3.0, 4.0, 5.0, "b")
    assert result.answer == result.b


@pytest.mark.parametrize(
    "texts, expected",
    [
        (("3", "4", ""), "c"),
        (("", "4", "5"), "a"),
        (("3", "  ", "5"), "b"),
        (("3", "", ""), None),
        (("3", "4", "5"), None),
        (("", "", ""), None),
    ],
)
def test_pending_side(texts, expected):
    assert pending_side(*texts) == expected