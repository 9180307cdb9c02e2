[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "guesswho"
version = "0.1.0"
description = "A terminal detective game: narrow down the suspects and name the culprit"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "guess-who", "ansi", "puzzle"]
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
guesswho = "guesswho.main:main"

[tool.hatch.build.targets.wheel]
packages = ["guesswho"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
