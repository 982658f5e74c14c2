[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tododesk"
version = "0.1.0"
description = "A multi-user to-do list and calendar for the terminal, kept in a plain text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "to-do", "tasks", "calendar", "terminal", "cli", "scheduling"]
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
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tododesk = "tododesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tododesk"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
