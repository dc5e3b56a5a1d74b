[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sunoku"
version = "0.1.0"
description = "Sudoku solver with a backtracking method and an elimination-first strategy"
requires-python = ">=3.10"
dependencies = []
keywords = ["sudoku", "solver", "puzzle", "backtracking", "constraint"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sunoku = "sunoku.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sunoku"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
