[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tictacplay"
version = "1.0.0"
description = "Tic-tac-toe with a minimax opponent, two-player matches and per-user game history"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "game", "minimax", "alpha-beta", "board game"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tictacplay = "tictacplay.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tictacplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
