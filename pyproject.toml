[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "transferstats"
version = "0.1.0"
description = "Generate token transfers, store them in ClickHouse and compute per-address trading statistics"
requires-python = ">=3.10"
dependencies = [
    "python-dotenv",
]
keywords = ["clickhouse", "transfers", "statistics", "trading", "volume", "balance"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
transferstats = "transferstats.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["transferstats"]

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
warn_unused_ignores = true
warn_redundant_casts = true
