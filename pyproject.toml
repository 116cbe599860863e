[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labworks"
version = "0.1.0"
description = "Small exercises: AES-128 rounds in a feedback block mode, bit-count splits, matrix puzzles and linear system solvers"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "gauss", "linear-systems", "simple-iteration", "matrix", "word-search", "popcount"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labworks-aes = "labworks.aes:main"
labworks-banana = "labworks.banana:main"
labworks-matrix = "labworks.matrix:main"
labworks-slau = "labworks.slau:main"

[tool.hatch.build.targets.wheel]
packages = ["labworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
