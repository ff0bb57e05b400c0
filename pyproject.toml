[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "indiegame"
version = "0.1.0"
description = "A small component-based 2D game engine on pygame with scenes, layers, sprite animation and keyboard input, plus a sample game"
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "sprites", "animation", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
indiegame = "indiegame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["indiegame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
