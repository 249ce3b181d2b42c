[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "utilbox"
version = "1.0.0"
description = "Small utilities: string helpers, CSV reading, command-line option parsing, dates, durations, currency amounts, matrices and a blocking queue"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "csv", "command-line", "time", "duration", "currency", "queue", "matrix", "utf-8"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["utilbox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
