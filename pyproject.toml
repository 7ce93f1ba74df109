[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubraycaster"
version = "0.1.0"
description = "A first-person raycasting maze explorer driven by .cub scene files"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "maze", "cub", "pygame", "xpm", "minimap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Environment :: X11 Applications",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubraycaster = "cubraycaster.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cubraycaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
