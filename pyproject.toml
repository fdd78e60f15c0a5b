[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clichess"
version = "0.1.0"
description = "A small two-player chess game for the terminal."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "game", "terminal", "cli", "board-game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clichess = "clichess.game:main"

[tool.hatch.build.targets.wheel]
packages = ["clichess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
