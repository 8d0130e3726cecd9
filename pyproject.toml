[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kalkulator_smp"
version = "1.0.0"
description = "Junior high school mathematics calculators: straight lines, probability, Pythagoras, linear systems, price problems and basic statistics"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "mathematics",
    "education",
    "calculator",
    "pythagoras",
    "probability",
    "statistics",
    "linear-equations",
    "gaussian-elimination",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kalkulator_smp"]

[tool.hatch.build.targets.sdist]
include = ["kalkulator_smp", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
