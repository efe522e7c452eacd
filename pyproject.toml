[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "freedraw"
version = "0.1.0"
description = "Turn freehand input points into smooth, pressure-sensitive stroke outlines and SVG paths"
requires-python = ">=3.10"
dependencies = []
keywords = ["drawing", "graphics", "freehand", "stroke", "svg", "ink"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
freedraw-generate = "freedraw.generate:main"

[tool.hatch.build.targets.wheel]
packages = ["freedraw"]

[tool.pytest.ini_options]
addopts = "-ra"
