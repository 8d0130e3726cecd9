"""Probability of an event, P(A) = n(A) / n(S), with reverse solving."""

from __future__ import annotations

import math
from dataclasses import dataclass

_EPS = 1e-12
_TOLERANCE = 1e-6


class ProbabilityError(ValueError):
    """Raised when probability inputs are missing, out of range or inconsistent."""


def _parse_number(text: str) -> float | None:
    text = text.strip()
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def parse_probability(text: str) -> float | None:
    """Parse P(A) given as a decimal, a percentage with '%', or a bare 1-100 value.

    Returns None for empty or unreadable input.
    """
    text = text.strip()
    if not text:
        return None
    if text.endswith("%"):
        number = _parse_number(text[:-1])
        value = None if number is None else number / 100.0
    else:
        value = _parse_number(text)
        if value is not None and 1.0 < value <= 100.0:
            value /= 100.0
    if value is not None and not 0.0 <= value <= 1.0:
        raise ProbabilityError("P(A) harus antara 0 dan 1 (atau 0% - 100%).")
    return value


def interpret(percent: float) -> str:
    """Describe how likely an event with the given percentage is."""
    if percent == 0:
        return "Kejadian ini mustahil terjadi."
    if percent <= 20:
        return "Kejadian ini sangat jarang terjadi."
    if percent <= 40:
        return "Kejadian ini kurang sering terjadi."
    if percent <= 60:
        return "Kejadian ini memiliki kemungkinan seimbang."
    if percent <= 80:
        return "Kejadian ini cukup sering terjadi."
    if percent < 100:
        return "Kejadian ini sangat sering terjadi."
    return "Kejadian ini pasti selalu terjadi."


@dataclass(frozen=True)
class ProbabilityResult:
    """Solved probability values; ``solved_for`` is None when all were given."""

    n_a: float
    n_s: float
    probability: float
    solved_for: str | None

    @property
    def percent(self) -> float:
        return self.probability * 100.0

    @property
    def n_a_count(self) -> int:
        return _round_half_away(self.n_a)

    @property
    def n_s_count(self) -> int:
        return _round_half_away(self.n_s)

    @property
    def interpretation(self) -> str:
        return interpret(self.percent)

    @property
    def mode_label(self) -> str:
        """Title suffix naming the reverse-solved count, if any."""
        if self.solved_for in ("n(A)", "n(S)"):
            return f" (Reverse: mencari {self.solved_for})"
        return ""

    @property
    def percent_text(self) -> str:
        return f"P(A) = {self.percent:.2f}%"


def solve_probability(
    n_a: float | None, n_s: float | None, p_a: float | None
) -> ProbabilityResult:
    """Find the one missing value of n(A), n(S) and P(A), or verify all three."""
    given = (("n(A)", n_a), ("n(S)", n_s), ("P(A)", p_a))
    empty = [name for name, value in given if value is None]

    if len(empty) > 1:
        raise ProbabilityError(
            f"Isi minimal 2 dari 3 nilai. Saat ini kosong: {', '.join(empty)}."
        )

    if not empty:
        expected = n_a / n_s if abs(n_s) > _EPS else 0.0
        if abs(expected - p_a) > _TOLERANCE:
            raise ProbabilityError("Semua terisi tapi tidak konsisten.")
        return ProbabilityResult(n_a, n_s, p_a, None)

    missing = empty[0]
    if missing == "P(A)":
        if n_s <= 0:
            raise ProbabilityError("n(S) harus lebih dari 0.")
        if n_a < 0:
            raise ProbabilityError("n(A) tidak boleh negatif.")
        if n_a > n_s:
            raise ProbabilityError("n(A) tidak boleh lebih besar dari n(S).")
        return ProbabilityResult(n_a, n_s, n_a / n_s, missing)

    if missing == "n(A)":
        if n_s <= 0:
            raise ProbabilityError("n(S) harus lebih dari 0.")
        return ProbabilityResult(p_a * n_s, n_s, p_a, missing)

    if abs(p_a) < _EPS:
        raise ProbabilityError("P(A) harus lebih dari 0 untuk mencari n(S).")
    if n_a < 0:
        raise ProbabilityError("n(A) tidak boleh negatif.")
    return ProbabilityResult(n_a, n_a / p_a, p_a, missing)