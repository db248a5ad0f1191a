[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paretokit"
version = "0.1.0"
description = "Tools for nondominated sets: filtering, Pareto ranking, normalisation and weighted hypervolume"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "multi-objective",
    "pareto",
    "nondominated",
    "hypervolume",
    "optimisation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
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
nondominated = "paretokit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["paretokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
