[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hollowzero"
version = "0.1.0"
description = "A small side-scrolling game built on pygame: camera, sprite animation, collision boxes, state machine and a player character"
requires-python = ">=3.10"
keywords = ["game", "platformer", "pygame", "animation", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hollowzero = "hollowzero.game:main"

[tool.hatch.build.targets.wheel]
packages = ["hollowzero"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
