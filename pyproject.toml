[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "forg"
version = "0.1.0"
description = "Organize files in a directory by type or date, rename them in bulk, find duplicate files and search directory trees."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["files", "organizer", "duplicates", "rename", "search", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
forg = "forg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["forg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
