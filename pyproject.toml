[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecosim"
version = "0.1.0"
description = "Turn-based predator and prey ecosystem simulation on a grid of linked nodes"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "ecosystem", "predator", "prey", "grid"]
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ecosim = "ecosim.simulacion:main"

[tool.hatch.build.targets.wheel]
packages = ["ecosim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
