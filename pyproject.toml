[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparsematrix"
version = "0.1.0"
description = "Square sparse matrices stored as sorted rows of entries, with a command-line report tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["sparse", "matrix", "linear algebra", "doubly linked list", "cursor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sparsematrix = "sparsematrix.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sparsematrix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
