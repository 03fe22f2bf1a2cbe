[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockblast"
version = "0.1.0"
description = "A terminal block-placing puzzle game on a 12x12 board where full rows, columns and diagonals clear"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "blocks", "board", "terminal"]
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
blockblast = "blockblast.app:main"

[tool.hatch.build.targets.wheel]
packages = ["blockblast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["blockblast"]
warn_unused_ignores = true
