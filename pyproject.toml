[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iterweave"
version = "0.1.0"
description = "Iterator adaptors and helpers: combinations, interleaving, deduplication, result-aware adaptors, lazy formatting and a small iris plotting command."
requires-python = ">=3.10"
dependencies = []
keywords = ["iterator", "itertools", "combinations", "generators", "adaptors"]
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

[project.scripts]
iterweave-iris = "iterweave.iris:main"

[tool.hatch.build.targets.wheel]
packages = ["iterweave"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
