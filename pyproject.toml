[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ctcikit"
version = "0.1.0"
description = "Classic interview exercises on strings, matrices, linked lists, stacks, queues, trees and graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "interview", "linked-list", "stack", "queue", "binary-tree", "graph"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ctcikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
