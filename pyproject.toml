[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalab"
version = "0.1.0"
description = "Classic data structures and algorithms: lists, stacks, queues, polynomials, expressions, intervals and shortest paths"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "linked-list",
    "circular-list",
    "priority-queue",
    "stack",
    "queue",
    "polynomial",
    "postfix",
    "bellman-ford",
    "intervals",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
dsalab-expr = "dsalab.expressions:main"
dsalab-intervals = "dsalab.intervals:main"
dsalab-bellman-ford = "dsalab.graphs:main"
dsalab-pattern = "dsalab.pattern:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
