"""Junior high school mathematics calculators: lines, probability, Pythagoras, linear systems, prices, statistics and a feature carousel."""

__version__ = "1.0.0"