# kalkulator_smp

Step-by-step mathematics calculators for junior high school topics. Each
calculator takes plain numbers (or the text a learner typed), works out the
missing value, and returns the intermediate values so the working can be
shown. Messages in errors and results are in Indonesian.

Several calculators support *reverse solving*: leave exactly one value empty
(`None`) and the calculator finds it from the others. When every value is
given, the calculator checks that they are consistent instead.

The package needs nothing beyond the Python standard library (Python 3.10 or
later). Install `pytest` (the `test` extra) to run the tests.

## Modules

| Module | Topic |
| --- | --- |
| `kalkulator_smp.garis_lurus` | Straight lines `y = m·x + c` |
| `kalkulator_smp.peluang` | Probability `P(A) = n(A) / n(S)` |
| `kalkulator_smp.pythagoras` | Right-angled triangles `a² + b² = c²` |
| `kalkulator_smp.linear` | Systems of linear equations by Gaussian elimination |
| `kalkulator_smp.harga` | Price word problems solved as linear systems |
| `kalkulator_smp.statistika` | Mean, median, mode, range, variance, standard deviation |
| `kalkulator_smp.carousel` | State and layout of the feature carousel on a start screen |

## Straight lines

`solve_line(m, c, x, y)` takes the gradient, the constant, a point's x and
its y. Leave one of them as `None` to have it computed; give all four to have
them checked. It returns a `LineSolution` with `answer` (the computed value,
or `None` after a check), `x_intercept` (`None` for a horizontal line),
`y_intercept` and a `label` such as `y = 2x + 1`. It raises `LineInputError`
when more than one value is missing, when the four values are inconsistent,
or when the missing value cannot be found (x on a horizontal line, or m when
x is 0).

`preview_equation(m_text, c_text)` builds the live preview text from raw
fields, for example `preview_equation("2", "-1")` gives `y = 2x - 1`, and
blank fields show as `m` and `c`. `sample_line(m, c, x, y, points=200)`
returns `points + 1` evenly spaced points of the line over a symmetric range
wide enough to include the point (x, y).

```python
from kalkulator_smp.garis_lurus import solve_line

solution = solve_line(2, 1, 3, None)
solution.answer        # 7.0
```

## Probability

`parse_probability(text)` reads a probability written as a fraction of one
(`0.25`), as a percentage (`25%`), or as a bare number above 1 and up to 100
(`25`, read as a percentage). It returns `None` for blank or unreadable text
and raises `ProbabilityError` for values outside 0–1.

`solve_probability(n_a, n_s, p_a)` finds whichever of the three is missing,
or checks all three, and returns a `ProbabilityResult` with `percent`,
rounded counts `n_a_count` and `n_s_count`, `interpretation` and
`percent_text`. Invalid combinations raise `ProbabilityError`.
`interpret(percent)` gives the plain-language description of a percentage.

```python
from kalkulator_smp.peluang import parse_probability, solve_probability

solve_probability(2, 6, None).probability                        # 0.333...
solve_probability(None, 6, parse_probability("50%")).n_a         # 3.0
```

## Pythagoras

`solve_pythagoras(a, b, c)` finds the one missing side (`c` is the
hypotenuse) and returns a `PythagorasResult` with the three sides, the
`answer`, its `squared` value, the `formula` used, and whether the sides are
`verified` and form a `triple`. Missing too many or too few sides,
non-positive sides, or a hypotenuse that is not longer than the given leg
raise `PythagorasError`.

`pythagorean_triple(a, b, c)` returns the sides as integers when they form a
whole-number Pythagorean triple, otherwise `None`. `pending_side(a_text,
b_text, c_text)` names the side that will be computed once exactly two fields
are filled in.

```python
from kalkulator_smp.pythagoras import solve_pythagoras

result = solve_pythagoras(3, 4, None)
result.answer, result.triple   # (5.0, (3, 4, 5))
```

## Linear systems

`gaussian_elimination(a, b)` solves `A·x = b` with partial pivoting and
returns an `EliminationResult`: the solution `x` and `steps`, each a
description paired with a snapshot of the augmented matrix (or `None`). A
singular matrix raises `SingularSystemError`.

`apply_known_values(a, b, known)` substitutes variables whose values are
already known (a mapping from variable index to value) and returns the
`ReducedSystem` of the remaining unknowns. `solve_system(a, b, known=None)`
combines both and returns a `SystemSolution` with the values of all
variables in order and `by_name`. `verify_solution(a, b, values)` recomputes
each equation's left side and reports whether it matches.
`variable_names(count)` gives the names `x, y, z, w, p, q, r, s` used for up
to eight variables.

```python
from kalkulator_smp.linear import solve_system

solution = solve_system([[1, 1], [1, -1]], [10, 2])
solution.by_name   # {'x': 6.0, 'y': 4.0}
```

## Price problems

`solve_prices(names, a, b, known=None)` solves a shopping problem such as
"2 pencils and 1 book cost 7000" for the price of one of each item, and
returns a `PriceSolution` with `prices`, `by_name`, `verification` and
`price_lines(prefix)`. `item_names(names)` trims names and replaces blank
ones with `barang 1`, `barang 2`, and so on.

`currency_prefix(currency, custom="")` turns a `Currency` choice (`RUPIAH`,
`NONE`, `USD`, `EUR`, `CUSTOM`) into its symbol. `format_currency(value,
prefix="")` writes whole amounts with comma thousands separators and other
amounts with two decimals, for example `Rp 7,000`.

```python
from kalkulator_smp.harga import solve_prices

solution = solve_prices(["pensil", "buku"], [[2, 1], [1, 3]], [7000, 11000])
solution.price_lines("Rp")
```

## Statistics

`compute_statistics(text, known_mean=None)` takes comma-separated data and
returns `Statistics`: mean, median, modes, range, population variance and
standard deviation, plus `sorted_values` and `mode_text`. One entry may be
`?` when the mean is known; that value is worked out first and reported as
`missing_value`. Empty data, fewer than two values, unreadable entries, more
than one `?`, or a `?` without a mean raise `StatisticsError`.

`count_entries(text)` counts the non-blank entries typed so far, and
`modes(values)` returns the most frequent values in ascending order — empty
when every distinct value is equally frequent.

```python
from kalkulator_smp.statistika import compute_statistics

stats = compute_statistics("5, 7, ?, 9, 5", 6)
stats.missing_value   # 4.0
```

## Carousel

`Carousel(features=None)` keeps the focused card among `Feature` entries
(the default list names seven calculators) and reacts to `scroll_left`,
`scroll_right`, `click_card`, `handle_key` (key names such as `"left"`,
`"d"`, `"enter"`) and `wheel(dx, dy)`. After each scroll it ignores further
scrolling until `release_cooldown` is called. `focus_card(page_index)` takes
a 1-based page index.

`placements(width, height)` returns a `CardPlacement` (position, scale,
opacity, depth, rotation) for every card, using the `SLOT_PARAMS` of its
slot; `card_center(width, height)` gives the centre of the focused card and
`dot_rects(width, height)` the page indicator dots. `slot_of(card_index,
focus_index, count)` gives a card's position relative to the focused one,
clamped to -3…3.

## What the package does not do

It is a library of calculations only. There is no window, screen or
command-line program: nothing draws the carousel, the line chart, the
triangle or the probability chart, and no HTML or formatted result page is
produced beyond the values and short text shown above. The timing of the
scroll cooldown is left to the caller. The default carousel lists solid
geometry (`Kalkulator Bangun Ruang`) and basic arithmetic (`Kalkulator
Basic`) calculators, but the package has no modules for them.