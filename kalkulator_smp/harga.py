"""Price word problems: unit prices of items solved as a linear system."""

from __future__ import annotations

import enum
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from kalkulator_smp.linear import (
    EliminationResult,
    ReducedSystem,
    solve_system,
    verify_solution,
)

_INTEGER_TOLERANCE = 1e-9


class Currency(enum.Enum):
    """Currency choices offered for displaying prices."""

    RUPIAH = "Rp (Rupiah)"
    NONE = "Tanpa satuan"
    USD = "USD ($)"
    EUR = "EUR (€)"
    CUSTOM = "Kustom..."


_PREFIXES = {
    Currency.RUPIAH: "Rp",
    Currency.NONE: "",
    Currency.USD: "$",
    Currency.EUR: "€",
}


def currency_prefix(currency: Currency, custom: str = "") -> str:
    """Return the symbol written before amounts; ``custom`` is used for CUSTOM."""
    if currency is Currency.CUSTOM:
        return custom.strip()
    return _PREFIXES[currency]


def format_currency(value: float, prefix: str = "") -> str:
    """Format an amount: whole values with thousands grouping, others with 2 decimals."""
    if math.isfinite(value) and abs(value - round(value)) < _INTEGER_TOLERANCE:
        number = f"{int(round(value)):,}"
    else:
        number = f"{value:.2f}"
    return f"{prefix} {number}" if prefix else number


def item_names(names: Sequence[str]) -> tuple[str, ...]:
    """Trim item names, replacing blank ones with a numbered default."""
    return tuple(
        name.strip() or f"barang {index}" for index, name in enumerate(names, start=1)
    )


@dataclass(frozen=True)
class PriceSolution:
    """Unit price of every item, ordered as the items were given."""

    names: tuple[str, ...]
    prices: tuple[float, ...]
    coefficients: tuple[tuple[float, ...], ...]
    totals: tuple[float, ...]
    elimination: EliminationResult
    known: dict[int, float] = field(default_factory=dict)
    reduced: ReducedSystem | None = None

    @property
    def by_name(self) -> dict[str, float]:
        return dict(zip(self.names, self.prices))

    @property
    def verification(self) -> list[tuple[float, bool]]:
        """Each equation's total recomputed from the prices, and whether it matches."""
        return verify_solution(self.coefficients, self.totals, self.prices)

    def price_lines(self, prefix: str = "") -> list[str]:
        """One display line per item stating its unit price."""
        return [
            f"Harga 1 {name} = {format_currency(price, prefix)}"
            for name, price in zip(self.names, self.prices)
        ]


def solve_prices(
    names: Sequence[str],
    a: Sequence[Sequence[float]],
    b: Sequence[float],
    known: Mapping[int, float] | None = None,
) -> PriceSolution:
    """Solve for unit prices given item counts per equation and each total.

    ``known`` maps item index to a price already known, for reverse solving.
    """
    if len(names) != len(b):
        raise ValueError("there must be one name for every item")
    labels = item_names(names)
    known = dict(known or {})
    solution = solve_system(a, b, known)
    return PriceSolution(
        names=labels,
        prices=solution.values,
        coefficients=tuple(tuple(float(v) for v in row) for row in a),
        totals=tuple(float(v) for v in b),
        elimination=solution.elimination,
        known=known,
        reduced=solution.reduced,
    )