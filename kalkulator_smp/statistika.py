"""Descriptive statistics of a comma-separated data list, with one missing value."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

_MISSING_MARK = "?"
NO_MODE = "Tidak ada modus"


class StatisticsError(ValueError):
    """Raised when the data cannot be read or is not enough to compute statistics."""


def _disp(value: float) -> str:
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return f"{value:.6g}"


def _parse_entry(text: str) -> float:
    entry = text.strip()
    if not entry or "_" in entry:
        raise StatisticsError(f"Data tidak valid: '{entry}'.")
    try:
        return float(entry)
    except ValueError:
        raise StatisticsError(f"Data tidak valid: '{entry}'.") from None


def _split_entries(text: str) -> list[str]:
    return [part for part in text.split(",") if part]


def count_entries(text: str) -> int:
    """Count the non-blank comma-separated entries in ``text``."""
    return sum(1 for part in text.strip().split(",") if part.strip())


def modes(values: Iterable[float]) -> tuple[float, ...]:
    """Return the most frequent values in ascending order.

    When every distinct value (of more than one) is equally frequent there is
    no mode and the result is empty.
    """
    counts = Counter(values)
    if not counts:
        return ()
    top = max(counts.values())
    winners = [value for value, count in counts.items() if count == top]
    if len(winners) == len(counts) and len(counts) > 1:
        return ()
    return tuple(sorted(winners))


@dataclass(frozen=True)
class Statistics:
    """Summary statistics of a data set, in the order the data was given."""

    values: tuple[float, ...]
    mean: float
    median: float
    modes: tuple[float, ...]
    range: float
    variance: float
    std_dev: float
    missing_value: float | None = None

    @property
    def count(self) -> int:
        return len(self.values)

    @property
    def sorted_values(self) -> tuple[float, ...]:
        return tuple(sorted(self.values))

    @property
    def mode_text(self) -> str:
        """The modes joined with commas, or a note that there is none."""
        if not self.modes:
            return NO_MODE
        return ", ".join(_disp(value) for value in self.modes)


def compute_statistics(text: str, known_mean: float | None = None) -> Statistics:
    """Compute statistics of comma-separated ``text``.

    One entry may be ``?``; it is then found from ``known_mean``.
    """
    raw = text.strip()
    if not raw:
        raise StatisticsError("Data kosong.")

    parts = _split_entries(raw)
    missing_at = [i for i, part in enumerate(parts) if part.strip() == _MISSING_MARK]

    missing_value = None
    if len(missing_at) == 1 and known_mean is not None:
        known_sum = sum(
            _parse_entry(part) for i, part in enumerate(parts) if i != missing_at[0]
        )
        missing_value = known_mean * len(parts) - known_sum
        parts[missing_at[0]] = f"{missing_value:g}"
    elif len(missing_at) > 1:
        raise StatisticsError("Hanya boleh ada 1 tanda ? dalam data.")
    elif len(missing_at) == 1:
        raise StatisticsError("Ada data ? tapi rata-rata yang diketahui belum diisi.")

    data = tuple(_parse_entry(part) for part in parts)
    if len(data) < 2:
        raise StatisticsError("Masukkan minimal 2 data.")

    n = len(data)
    mean = sum(data) / n
    ordered = sorted(data)
    half = n // 2
    if n % 2 == 0:
        median = (ordered[half - 1] + ordered[half]) / 2.0
    else:
        median = ordered[half]
    variance = sum((value - mean) ** 2 for value in data) / n

    return Statistics(
        values=data,
        mean=mean,
        median=median,
        modes=modes(data),
        range=ordered[-1] - ordered[0],
        variance=variance,
        std_dev=math.sqrt(variance),
        missing_value=missing_value,
    )