[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "r1csgadgets"
version = "0.1.0"
description = "Boolean gadgets and allocation helpers for rank-1 constraint systems over prime fields"
requires-python = ">=3.10"
dependencies = []
keywords = ["r1cs", "zero-knowledge", "snark", "constraint-system", "gadgets", "boolean"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["r1csgadgets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
