[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coinflip"
version = "1.0.0"
description = "A terminal coin-flipping puzzle: turn every coin on a 4x4 board gold side up."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "game", "coin", "lights-out", "terminal"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
coinflip = "coinflip.app:main"

[tool.hatch.build.targets.wheel]
packages = ["coinflip"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
