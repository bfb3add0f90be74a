[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "obvtools"
version = "0.1.0"
description = "Support library for a PCB board viewer: configuration, history, search, hulls, annotations and board data"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "pcb",
    "boardview",
    "electronics",
    "repair",
    "configuration",
    "convex-hull",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["obvtools"]

[tool.hatch.build.targets.sdist]
include = ["obvtools", "tests"]

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
