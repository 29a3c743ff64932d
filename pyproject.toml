[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchcore"
version = "1.0.0"
description = "Core data structures, algorithms and file-backed containers for a search engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["data-structures", "algorithms", "b-plus-tree", "avl-tree", "mmap", "config"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["searchcore"]

[tool.pytest.ini_options]
addopts = "-ra"
