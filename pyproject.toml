[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphquest"
version = "0.1.0"
description = "A terminal adventure game over a graph of scenarios loaded from a CSV file"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text adventure", "graph", "csv", "terminal", "hash table"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphquest = "graphquest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["graphquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
