[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphdb"
version = "0.1.0"
description = "An in-memory weighted directed graph store with structural checks, scheduling and a small HTTP server"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "database", "dag", "topological-sort", "cycle-detection", "http"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphdb-server = "graphdb.server:main"

[tool.hatch.build.targets.wheel]
packages = ["graphdb"]

[tool.pytest.ini_options]
addopts = "-ra"
