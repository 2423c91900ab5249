[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "booktables"
version = "0.1.0"
description = "String-keyed hash tables with chaining, linear probing and double hashing, plus a small digital library"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "hash map", "hash set", "linear probing", "double hashing", "chaining", "library"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["booktables"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
