[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubetimer"
version = "0.1.0"
description = "A terminal speedcubing timer with scrambles, inspection, averages and solve history"
requires-python = ">=3.10"
dependencies = []
keywords = ["rubik", "cube", "speedcubing", "timer", "scramble", "terminal", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
cubetimer = "cubetimer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cubetimer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
