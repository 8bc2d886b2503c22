[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestsolvers"
version = "0.1.0"
description = "Solvers for a collection of short competitive-programming problems, each runnable as a stdin/stdout command."
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "greedy", "puzzles", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
false-alarm = "contestsolvers.false_alarm:main"
only-one-digit = "contestsolvers.only_one_digit:main"
make-it-permutation = "contestsolvers.make_it_permutation:main"
no-casino = "contestsolvers.no_casino:main"
bento-box = "contestsolvers.bento_box:main"
definitely-make-it = "contestsolvers.definitely_make_it:main"
make-it-beautiful = "contestsolvers.make_it_beautiful:main"
bbq-buns = "contestsolvers.bbq_buns:main"
last-time = "contestsolvers.last_time:main"
boats = "contestsolvers.boats:main"

[tool.hatch.build.targets.wheel]
packages = ["contestsolvers"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
