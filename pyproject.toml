[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compkit"
version = "0.1.0"
description = "Algorithms and data structures for competitive programming and heuristic contests"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "algorithms",
    "data-structures",
    "competitive-programming",
    "graph",
    "number-theory",
    "optimal-transport",
    "kalman-filter",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["compkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
