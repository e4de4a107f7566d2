[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stackalgos"
version = "0.1.0"
description = "Stack and queue data structures, expression notation conversion and monotonic-stack algorithms"
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = [
    "stack",
    "queue",
    "min stack",
    "monotonic stack",
    "infix",
    "postfix",
    "prefix",
    "algorithms",
    "data structures",
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
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["stackalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
