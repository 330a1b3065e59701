[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lawndefense"
version = "0.1.0"
description = "A lane-based lawn defense game: plant defenders on a 5x9 lawn and hold off zombie waves, drawn with pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "tower defense", "pygame", "real-time strategy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lawndefense = "lawndefense.manager:main"

[tool.hatch.build.targets.wheel]
packages = ["lawndefense"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
