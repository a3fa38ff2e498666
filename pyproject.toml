[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tictacnet"
version = "0.1.0"
description = "Networked two-player tic-tac-toe board, client connection and pygame drawing, with small JSON output helpers"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["tic-tac-toe", "game", "network", "multiplayer", "pygame", "json", "grisu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tictacnet"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
