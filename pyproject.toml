[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacenerds"
version = "0.1.0"
description = "Game-logic building blocks for a cooperative starship bridge simulator"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "quaternion", "vector", "marshalling", "vector-font", "starship"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["spacenerds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
