[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nightguard"
version = "1.3.1"
description = "Game logic for a night-watch survival game: animatronic AI, security cameras, custom nights and software image buffers."
requires-python = ">=3.10"
keywords = ["game", "horror", "simulation", "animatronic", "framebuffer", "png", "targa"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nightguard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
