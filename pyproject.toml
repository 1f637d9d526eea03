[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hrcli"
version = "0.1.0"
description = "A small command-line tool for keeping, listing and searching records of people"
requires-python = ">=3.10"
dependencies = []
keywords = ["hr", "human-resources", "cli", "records", "search"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hr = "hrcli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hrcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
