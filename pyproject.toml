[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algotemplates"
version = "0.1.0"
description = "Classic algorithm templates: sorting, big numbers, data structures, graphs, number theory, dynamic programming and greedy methods."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "graphs",
    "number-theory",
    "dynamic-programming",
    "greedy",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algotemplates"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
