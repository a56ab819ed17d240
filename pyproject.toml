[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "famclicker"
version = "1.0.0"
description = "A small incremental clicker game with click upgrades, an auto-clicker and save files"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "clicker", "incremental", "idle", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
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
test = ["pytest"]

[project.scripts]
famclicker = "famclicker.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["famclicker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
