[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbfront"
version = "0.1.0"
description = "Front-end support for a handheld game console emulator: option parsing, frame pacing, frame queues, debug panel layout and memory inspection"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "game boy", "debugger", "frontend", "memory inspection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gbfront"]

[tool.hatch.build.targets.sdist]
include = ["gbfront", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
