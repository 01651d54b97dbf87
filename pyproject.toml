[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "klib"
version = "0.1.0"
description = "Small container library: a growable array, a bucketed hash map and a tiny test runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "dynamic array", "hash map", "data structures", "testing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["klib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
