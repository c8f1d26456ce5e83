[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tgshell"
version = "0.1.0"
description = "Building blocks for an interactive shell: cursor buffer, vi motions, undo history, completion values, styled text, menus and process spawning"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = [
    "shell",
    "readline",
    "line-editor",
    "vi-mode",
    "completion",
    "terminal",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tgshell"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
