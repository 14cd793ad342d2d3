[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestkit"
version = "0.1.0"
description = "Classic competitive-programming data structures and algorithms: sparse tables, treaps, Fenwick trees, DP, graphs and flows."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "dynamic-programming",
    "graphs",
    "max-flow",
    "sparse-table",
    "treap",
    "fenwick-tree",
    "convex-hull-trick",
    "shortest-paths",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["contestkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
