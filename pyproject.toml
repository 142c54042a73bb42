[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numberone"
version = "0.1.0"
description = "A typing game: type the words drifting across the screen before they reach the edge."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["typing", "game", "pygame", "words", "keyboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
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
numberone = "numberone.app:main"

[tool.hatch.build.targets.wheel]
packages = ["numberone"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
