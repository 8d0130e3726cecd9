"""Systems of linear equations solved by Gaussian elimination, with known values."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

MIN_VARIABLES = 2
MAX_VARIABLES = 3

_VARIABLE_NAMES = ("x", "y", "z", "w", "p", "q", "r", "s")
_PIVOT_EPS = 1e-12
_SKIP_EPS = 1e-14
_TOLERANCE = 1e-6

Matrix = tuple[tuple[float, ...], ...]
Step = tuple[str, "Matrix | None"]


class SingularSystemError(ValueError):
    """Raised when a system has no unique solution."""


def _disp(value: float) -> str:
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return f"{value:.6g}"


def _snapshot(rows: Sequence[Sequence[float]]) -> Matrix:
    return tuple(tuple(row) for row in rows)


def variable_names(count: int) -> tuple[str, ...]:
    """Return the names used for the first ``count`` unknowns."""
    if not 0 <= count <= len(_VARIABLE_NAMES):
        raise ValueError(
            f"count must be between 0 and {len(_VARIABLE_NAMES)}, got {count}"
        )
    return _VARIABLE_NAMES[:count]


def _check_square(a: Sequence[Sequence[float]], b: Sequence[float]) -> int:
    n = len(b)
    if len(a) != n or any(len(row) != n for row in a):
        raise ValueError("coefficient matrix must be square and match the right side")
    return n


@dataclass(frozen=True)
class EliminationResult:
    """Solution vector and the recorded elimination steps.

    Each step is a description and, where one belongs to it, a snapshot of
    the augmented matrix at that point.
    """

    x: tuple[float, ...]
    steps: tuple[Step, ...]


@dataclass(frozen=True)
class ReducedSystem:
    """The square system left after substituting the known values."""

    a: Matrix
    b: tuple[float, ...]
    unknown: tuple[int, ...]


def gaussian_elimination(
    a: Sequence[Sequence[float]], b: Sequence[float]
) -> EliminationResult:
    """Solve ``a·x = b`` with partial pivoting and back substitution."""
    n = _check_square(a, b)
    rows = [[float(v) for v in a[i]] + [float(b[i])] for i in range(n)]

    steps: list[Step] = [("Matriks augmented awal [A|b]:", _snapshot(rows))]

    for col in range(n):
        max_row = max(range(col, n), key=lambda r: abs(rows[r][col]))
        if abs(rows[max_row][col]) <= abs(rows[col][col]):
            max_row = col
        if max_row != col:
            rows[col], rows[max_row] = rows[max_row], rows[col]
            steps.append(
                (f"Tukar baris {col + 1} dengan baris {max_row + 1}:", _snapshot(rows))
            )

        pivot = rows[col][col]
        if abs(pivot) < _PIVOT_EPS:
            raise SingularSystemError(
                "Sistem tidak memiliki solusi tunggal (matriks singular di kolom "
                f"{col + 1}). Periksa persamaan — mungkin ada persamaan yang "
                "sejajar atau bergantung linear."
            )

        eliminations = []
        for row in range(col + 1, n):
            if abs(rows[row][col]) < _SKIP_EPS:
                continue
            factor = rows[row][col] / pivot
            rows[row] = [
                value - factor * pivot_value
                for value, pivot_value in zip(rows[row], rows[col])
            ]
            eliminations.append(
                f"B{row + 1} = B{row + 1} - ({_disp(factor)}) x B{col + 1}"
            )
        if eliminations:
            steps.append(
                ("Eliminasi maju: " + " | ".join(eliminations), _snapshot(rows))
            )

    steps.append(
        ("Matriks setelah eliminasi maju (row echelon):", _snapshot(rows))
    )

    x = [0.0] * n
    for i in reversed(range(n)):
        total = rows[i][n] - sum(rows[i][j] * x[j] for j in range(i + 1, n))
        x[i] = total / rows[i][i]

    steps.append(("Substitusi balik:", None))
    steps.extend(
        (f"Variabel ke-{i + 1} = {_disp(x[i])}", None) for i in reversed(range(n))
    )
    return EliminationResult(tuple(x), tuple(steps))


def apply_known_values(
    a: Sequence[Sequence[float]], b: Sequence[float], known: Mapping[int, float]
) -> ReducedSystem:
    """Substitute known variable values and keep enough equations for the rest."""
    n = _check_square(a, b)
    if any(not 0 <= index < n for index in known):
        raise ValueError("known value index out of range")

    unknown = tuple(i for i in range(n) if i not in known)
    b_new = [
        float(b[row]) - sum(a[row][index] * value for index, value in sorted(known.items()))
        for row in range(n)
    ]
    a_new = [[float(a[row][j]) for j in unknown] for row in range(n)]

    selected = [
        row for row in range(n) if any(abs(v) > _PIVOT_EPS for v in a_new[row])
    ]
    if len(selected) < len(unknown):
        raise SingularSystemError(
            "Tidak cukup persamaan yang valid untuk mencari variabel yang tidak diketahui."
        )

    chosen = selected[: len(unknown)]
    return ReducedSystem(
        a=_snapshot(a_new[row] for row in chosen),
        b=tuple(b_new[row] for row in chosen),
        unknown=unknown,
    )


def verify_solution(
    a: Sequence[Sequence[float]], b: Sequence[float], values: Sequence[float]
) -> list[tuple[float, bool]]:
    """For each equation, the left side evaluated at ``values`` and whether it matches."""
    checks = []
    for row, rhs in zip(a, b):
        computed = sum(coef * value for coef, value in zip(row, values))
        checks.append((computed, abs(computed - rhs) < _TOLERANCE))
    return checks


@dataclass(frozen=True)
class SystemSolution:
    """Values of all variables, ordered by variable index."""

    names: tuple[str, ...]
    values: tuple[float, ...]
    elimination: EliminationResult
    known: dict[int, float] = field(default_factory=dict)
    reduced: ReducedSystem | None = None

    @property
    def by_name(self) -> dict[str, float]:
        return dict(zip(self.names, self.values))


def solve_system(
    a: Sequence[Sequence[float]],
    b: Sequence[float],
    known: Mapping[int, float] | None = None,
) -> SystemSolution:
    """Solve the system, substituting any known variable values first."""
    n = _check_square(a, b)
    names = variable_names(n)
    known = dict(known or {})

    if not known:
        elimination = gaussian_elimination(a, b)
        return SystemSolution(names, elimination.x, elimination)

    reduced = apply_known_values(a, b, known)
    elimination = gaussian_elimination(reduced.a, reduced.b)
    values = dict(known)
    values.update(zip(reduced.unknown, elimination.x))
    return SystemSolution(
        names=names,
        values=tuple(float(values[i]) for i in range(n)),
        elimination=elimination,
        known=known,
        reduced=reduced,
    )