[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ostengine"
version = "0.1.0"
description = "A small game engine core: threaded logging, configuration parsing, input tracking, assets and a pygame-backed window."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game engine", "logging", "configuration", "input", "pygame"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ostengine = "ostengine.application:main"

[tool.hatch.build.targets.wheel]
packages = ["ostengine"]

[tool.pytest.ini_options]
addopts = "-ra"
