[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zombielab"
version = "0.1.0"
description = "A small 2D zombie arcade game and an interactive polygon editor built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "2d", "pygame", "polygon", "editor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zombielab = "zombielab.app:main"
zombielab-editor = "zombielab.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["zombielab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
