[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "balik"
version = "0.1.0"
description = "A terminal card game of Balik (Go Fish) against the computer"
requires-python = ">=3.10"
dependencies = []
keywords = ["card game", "go fish", "balik", "terminal game"]
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
balik = "balik.game:main"

[tool.hatch.build.targets.wheel]
packages = ["balik"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
