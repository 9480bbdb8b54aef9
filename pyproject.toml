[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tombeau"
version = "0.1.0"
description = "Engine for a scripted gamebook role-playing adventure: story scripts, player character, inventory and saves."
requires-python = ">=3.10"
keywords = ["gamebook", "interactive fiction", "role-playing", "adventure", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tombeau"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
