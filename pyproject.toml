[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalabs"
version = "0.1.0"
description = "Classic data structures with small console front ends: ragged matrices, queues, keyed tables, hash tables, threaded and AVL trees, and weighted graphs."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "hash table",
    "binary search tree",
    "avl tree",
    "graph",
    "queue",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalabs-matrix = "dsalabs.matrix:main"
dsalabs-sine = "dsalabs.simulation:main"
dsalabs-parent-table = "dsalabs.parent_dialog:main"
dsalabs-hash-table = "dsalabs.hash_dialog:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
