[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gitlogue"
version = "0.3.0"
description = "Colour themes, syntax highlighting and a wrapping paragraph widget for a Git history screensaver"
requires-python = ">=3.10"
keywords = ["git", "screensaver", "terminal", "syntax-highlighting", "themes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Screen Savers",
    "Topic :: Terminals",
]
dependencies = [
    "pygments",
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gitlogue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
