[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sliceops"
version = "0.1.0"
description = "Query helpers for Python sequences: filtering, projection, set operations, ordering and element access."
requires-python = ">=3.10"
dependencies = []
keywords = ["sequence", "list", "query", "functional", "collections"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sliceops"]

[tool.pytest.ini_options]
addopts = "-ra"
