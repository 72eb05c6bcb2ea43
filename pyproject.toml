[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "buglife"
version = "0.1.0"
description = "A small grid simulation of crawling, hopping and diagonal-moving bugs that fight over cells."
requires-python = ">=3.10"
keywords = ["simulation", "bugs", "grid", "game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
buglife = "buglife.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["buglife"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
