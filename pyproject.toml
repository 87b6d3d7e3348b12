[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "diceart"
version = "0.1.0"
description = "Turn images into mosaics built from pictures of dice faces"
requires-python = ">=3.10"
keywords = ["dice", "mosaic", "image", "art", "grayscale"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
diceart = "diceart.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["diceart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
