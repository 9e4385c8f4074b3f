[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frogs"
version = "0.1.0"
description = "Physical quantities with units, vectors, matrices, symbolic expressions and differentiation"
requires-python = ">=3.10"
dependencies = []
keywords = ["units", "physics", "quantities", "vectors", "matrices", "differentiation", "expressions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
frogs-demo = "frogs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["frogs"]

[tool.pytest.ini_options]
addopts = "-ra"
