[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchcore"
version = "1.0.0"
description = "Core data structures and algorithms for a search engine"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "search",
    "bloom-filter",
    "lru-cache",
    "heap",
    "priority-queue",
    "sparse-matrix",
    "string-view",
    "mmap",
    "algorithms",
]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["searchcore"]

[tool.pytest.ini_options]
addopts = "-ra"
