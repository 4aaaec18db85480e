[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stellar_idle"
version = "0.1.0"
description = "Simulation core of a space-exploration idle game: resources, upgrades, drones, dialogue events and animated scenery."
requires-python = ">=3.10"
dependencies = []
keywords = ["idle", "incremental", "game", "simulation", "perlin", "upgrades"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["stellar_idle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
