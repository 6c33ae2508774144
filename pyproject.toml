[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "overture"
version = "0.0.1"
description = "Building blocks for compilers and tools: hash tables, graphs, pools, diagnostics, option parsing, a thread pool and a small test harness."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hash-table",
    "graph",
    "priority-queue",
    "union-find",
    "string-interning",
    "diagnostics",
    "command-line",
    "thread-pool",
    "test-harness",
]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["overture"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
