[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cartengine"
version = "1.0.0"
description = "A small 2D game framework on pygame: worlds, actors, UI widgets, asset caching, easing curves and a demo game"
requires-python = ">=3.10"
keywords = ["game", "engine", "pygame", "2d", "ui", "easing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cartgame = "cartengine.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cartengine"]

[tool.pytest.ini_options]
addopts = "-ra"
