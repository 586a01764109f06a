[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simongame"
version = "0.1.0"
description = "A Simon memory game: tone sequences from an LFSR, serial-style controls and a high-score table"
requires-python = ">=3.10"
dependencies = []
keywords = ["simon", "memory game", "lfsr", "game", "state machine"]
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
simongame = "simongame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["simongame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
