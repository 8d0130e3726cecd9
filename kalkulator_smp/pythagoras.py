"""Right-triangle sides from the Pythagorean theorem, a² + b² = c²."""

from __future__ import annotations

import math
from dataclasses import dataclass

_TOLERANCE = 1e-6
_INTEGER_TOLERANCE = 1e-9
_SIDES = ("a", "b", "c")


class PythagorasError(ValueError):
    """Raised when the given sides cannot form the requested right triangle."""


def _disp(value: float) -> str:
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return f"{value:.6g}"


def pythagorean_triple(a: float, b: float, c: float) -> tuple[int, int, int] | None:
    """Return the sides as integers when they form a Pythagorean triple."""
    sides = (a, b, c)
    if any(abs(side - round(side)) >= _INTEGER_TOLERANCE for side in sides):
        return None
    ai, bi, ci = (int(round(side)) for side in sides)
    if ai * ai + bi * bi == ci * ci:
        return (ai, bi, ci)
    return None


@dataclass(frozen=True)
class PythagorasResult:
    """All three sides of the triangle and which one was computed."""

    a: float
    b: float
    c: float
    missing: str

    @property
    def answer(self) -> float:
        """The computed side."""
        return {"a": self.a, "b": self.b, "c": self.c}[self.missing]

    @property
    def squared(self) -> float:
        """The square of the computed side, the value under the root."""
        if self.missing == "c":
            return self.a * self.a + self.b * self.b
        if self.missing == "b":
            return self.c * self.c - self.a * self.a
        return self.c * self.c - self.b * self.b

    @property
    def formula(self) -> str:
        return {
            "c": "c² = a² + b²",
            "b": "b² = c² - a²",
            "a": "a² = c² - b²",
        }[self.missing]

    @property
    def question(self) -> str:
        return {
            "c": "Sisi miring (c)",
            "b": "Sisi alas (b)",
            "a": "Sisi tegak (a)",
        }[self.missing]

    @property
    def verified(self) -> bool:
        """Whether a² + b² equals c² within tolerance."""
        return abs(self.a * self.a + self.b * self.b - self.c * self.c) < _TOLERANCE

    @property
    def triple(self) -> tuple[int, int, int] | None:
        return pythagorean_triple(self.a, self.b, self.c)


def solve_pythagoras(
    a: float | None, b: float | None, c: float | None
) -> PythagorasResult:
    """Compute the one side given as None from the two others."""
    given = {"a": a, "b": b, "c": c}
    empty_count = sum(value is None for value in given.values())

    if empty_count > 1:
        raise PythagorasError(
            f"Tepat 1 sisi harus dikosongkan. Saat ini {empty_count} sisi kosong."
        )
    if empty_count == 0:
        raise PythagorasError(
            "Semua sisi terisi. Kosongkan 1 sisi yang ingin dicari."
        )

    for name in _SIDES:
        value = given[name]
        if value is not None and value <= 0:
            raise PythagorasError(f"Nilai {name} harus lebih dari 0.")

    if c is None:
        return PythagorasResult(a, b, math.sqrt(a * a + b * b), "c")

    if b is None:
        if c <= a:
            raise PythagorasError(
                "Hipotenusa (c) harus lebih besar dari kedua sisi lainnya. "
                f"c={_disp(c)} <= a={_disp(a)}."
            )
        return PythagorasResult(a, math.sqrt(c * c - a * a), c, "b")

    if c <= b:
        raise PythagorasError(
            "Hipotenusa (c) harus lebih besar dari kedua sisi lainnya. "
            f"c={_disp(c)} <= b={_disp(b)}."
        )
    return PythagorasResult(math.sqrt(c * c - b * b), b, c, "a")


def pending_side(a_text: str, b_text: str, c_text: str) -> str | None:
    """Name the side that will be computed: the empty one when exactly two are filled."""
    texts = dict(zip(_SIDES, (a_text.strip(), b_text.strip(), c_text.strip())))
    filled = sum(bool(text) for text in texts.values())
    if filled != 2:
        return None
    return next(name for name, text in texts.items() if not text)