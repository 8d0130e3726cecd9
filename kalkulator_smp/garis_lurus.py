"""Straight-line equation y = m.x + c with solving for any one missing value."""

from __future__ import annotations

import math
from dataclasses import dataclass

_EPS = 1e-12
_TOLERANCE = 1e-6
_VARIABLES = ("m", "c", "x", "y")


class LineInputError(ValueError):
    """Raised when the given values do not define a solvable line problem."""


def _disp(value: float) -> str:
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return f"{value:.6g}"


@dataclass(frozen=True)
class LineSolution:
    """A complete set of line values and which one was solved for."""

    m: float
    c: float
    x: float
    y: float
    target: str

    @property
    def answer(self) -> float | None:
        """The solved value, or None when all values were given and verified."""
        return {"m": self.m, "c": self.c, "x": self.x, "y": self.y}.get(self.target)

    @property
    def horizontal(self) -> bool:
        return abs(self.m) <= _EPS

    @property
    def x_intercept(self) -> tuple[float, float] | None:
        """Crossing with the x axis, or None for a horizontal line."""
        if self.horizontal:
            return None
        return (-self.c / self.m, 0.0)

    @property
    def y_intercept(self) -> tuple[float, float]:
        return (0.0, self.c)

    @property
    def label(self) -> str:
        """Legend text for the plotted line."""
        return f"y = {_disp(self.m)}x + {_disp(self.c)}"


def solve_line(
    m: float | None, c: float | None, x: float | None, y: float | None
) -> LineSolution:
    """Solve y = m.x + c where exactly one of the values is None.

    With all four values given, they are checked for consistency instead.
    """
    values = {"m": m, "c": c, "x": x, "y": y}
    empty = [name for name in _VARIABLES if values[name] is None]

    if not empty:
        expected = m * x + c
        if abs(expected - y) > _TOLERANCE:
            raise LineInputError(
                "Semua terisi tapi tidak konsisten: "
                f"y = {_disp(m)}*{_disp(x)}+{_disp(c)} = {_disp(expected)}, "
                f"bukan {_disp(y)}."
            )
        return LineSolution(m, c, x, y, "verify")

    if len(empty) > 1:
        raise LineInputError(
            "Tepat 1 variabel harus dikosongkan. "
            f"Saat ini kosong: {', '.join(empty)}."
        )

    target = empty[0]
    if target == "y":
        y = m * x + c
    elif target == "x":
        if abs(m) < _EPS:
            raise LineInputError(
                "m = 0, sehingga x tidak bisa dihitung (garis horizontal)."
            )
        x = (y - c) / m
    elif target == "m":
        if abs(x) < _EPS:
            raise LineInputError(
                "x = 0, sehingga m tidak bisa dihitung (pembagian dengan nol)."
            )
        m = (y - c) / x
    else:
        c = y - m * x
    return LineSolution(m, c, x, y, target)


def _to_float(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


def preview_equation(m_text: str, c_text: str) -> str:
    """Render the live equation preview from the raw m and c fields."""
    m_disp = m_text.strip() or "m"
    c_disp = c_text.strip() or "c"
    c_value = _to_float(c_disp)
    if c_value is None:
        sign, c_show = "+ ", c_disp
    else:
        sign = "+ " if c_value >= 0 else "- "
        c_show = f"{abs(c_value):g}"
    return f"y = {m_disp}x {sign}{c_show}"


def sample_line(
    m: float, c: float, x: float, y: float, points: int = 200
) -> list[tuple[float, float]]:
    """Sample the line over a symmetric range wide enough to show (x, y).

    Returns ``points + 1`` evenly spaced points.
    """
    if points < 1:
        raise ValueError("points must be at least 1")
    margin = max(abs(x) * 1.5, abs(y) * 1.5, 10.0)
    low, high = -margin, margin
    step = (high - low) / points
    return [(low + i * step, m * (low + i * step) + c) for i in range(points + 1)]