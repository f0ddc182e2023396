[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "pokebattle"
version = "0.1.0"
description = "A turn-based monster battle simulator with a terminal team editor and battle command"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "battle", "turn-based", "simulator", "terminal"]
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
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pokebattle = "pokebattle.cli:main"

[tool.setuptools.packages.find]
include = ["pokebattle*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
