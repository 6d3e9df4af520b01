[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tsttable"
version = "0.1.0"
description = "A string-keyed mapping backed by a ternary search tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["ternary search tree", "trie", "mapping", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tsttable"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
