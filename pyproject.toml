[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bintree"
version = "0.1.0"
description = "Parent-linked binary tree nodes with traversals, measures and a text renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "tree", "traversal", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
packages = ["bintree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
