[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shapeshooter"
version = "0.1.0"
description = "Game pieces for a 2D shape shooter, plus a small chase game played in a window"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "shooter", "2d", "pygame", "roguelike"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
shapeshooter-roguelike = "shapeshooter.roguelike:main"

[tool.hatch.build.targets.wheel]
packages = ["shapeshooter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
