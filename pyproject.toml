[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordladder"
version = "0.1.0"
description = "Word ladder solver and terminal game: shortest one-letter-change ladders, hints, saved sessions and analytics."
requires-python = ">=3.10"
dependencies = []
keywords = ["word ladder", "puzzle", "game", "bfs", "graph"]
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
wordladder = "wordladder.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordladder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
