import math

import pytest

from kalkulator_smp.harga import (
    Currency,
    PriceSolution,
    currency_prefix,
    format_currency,
    item_names,
    solve_prices,
)
from kalkulator_smp.linear import SingularSystemError

A = [[2.0, 3.0], [1.0, 2.0]]
B = [13000.0, 8000.0]


@pytest.mark.parametrize(
    "currency, expected",
    [
        (Currency.RUPIAH, "Rp"),
        (Currency.NONE, ""),
        (Currency.USD, "$"),
        (Currency.EUR, "€"),
    ],
)
def test_currency_prefix_fixed(currency, expected):
    assert currency_prefix(currency, "ignored") == expected


def test_currency_prefix_custom_is_trimmed():
    assert currency_prefix(Currency.CUSTOM, "  kr  ") == "kr"


def test_format_currency_without_prefix_has_no_leading_space():
    text = format_currency(7.0)
    assert text == "7"


def test_format_currency_prefix_joined_with_space():
    assert format_currency(7.0, "Rp") == "Rp " + format_currency(7.0)


def test_format_currency_fraction_two_decimals():
    assert format_currency(2.5, "") == "2.50"


def test_format_currency_large_whole_grouped_and_round_trips():
    text = format_currency(1234567.0)
    assert int(text.replace(",", "")) == 1234567
    assert "," in text


def test_item_names_defaults_for_blank():
    assert item_names(["  pensil ", "", "   "]) == ("pensil", "barang 2", "barang 3")


def test_solve_prices_satisfies_equations():
    result = solve_prices(["pensil", "buku"], A, B)
    assert isinstance(result, PriceSolution)
    for row, total in zip(A, B):
        computed = sum(c * p for c, p in zip(row, result.prices))
        assert math.isclose(computed, total, rel_tol=1e-9)
    assert all(ok for _, ok in result.verification)


def test_solve_prices_by_name_uses_labels():
    result = solve_prices(["", "buku"], A, B)
    assert list(result.by_name) == ["barang 1", "buku"]


def test_solve_prices_with_known_value_keeps_it():
    free = solve_prices(["pensil", "buku"], A, B)
    result = solve_prices(["pensil", "buku"], A, B, {0: free.prices[0]})
    assert result.prices[0] == free.prices[0]
    assert math.isclose(result.prices[1], free.prices[1], rel_tol=1e-9)
    assert result.reduced is not None
    assert result.reduced.unknown == (1,)


def test_price_lines_format():
    result = solve_prices(["pensil", "buku"], A, B)
    lines = result.price_lines("Rp")
    assert lines[0] == f"Harga 1 pensil = {format_currency(result.prices[0], 'Rp')}"
    assert len(lines) == 2


def test_singular_system_raises():
    with pytest.raises(SingularSystemError):
        solve_prices(["a", "b"], [[1.0, 2.0], [2.0, 4.0]], [3.0, 6.0])


def test_name_count_mismatch_raises():
    with pytest.raises(ValueError):
        solve_prices(["a"], A, B)


def test_inconsistent_known_value_fails_verification():
    result = solve_prices(["pensil", "buku"], A, B, {0: 0.0})
    assert not all(ok for _, ok in result.verification)