[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flapbird"
version = "0.1.0"
description = "A small flappy-bird style arcade game and a set of pygame drawing and input demos"
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "flappy", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
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
flapbird = "flapbird.app:main"
flapbird-drawings = "flapbird.drawings:main"
flapbird-letters = "flapbird.letters:main"
flapbird-movers = "flapbird.movers:main"
flapbird-drag = "flapbird.drag:main"

[tool.hatch.build.targets.wheel]
packages = ["flapbird"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
