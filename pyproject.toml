[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xtlo"
version = "0.1.0"
description = "Functional helpers for sequences, mappings, conditions, errors, channels and concurrency."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "collections", "functional", "channels", "concurrency"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xtlo"]

[tool.pytest.ini_options]
addopts = "-ra"
