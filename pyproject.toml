[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cellconnect"
version = "0.1.0"
description = "A timed puzzle game: trace one path from the start cell through every cell of the grid to the goal."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "pygame", "grid", "path"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cellconnect = "cellconnect.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cellconnect"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
