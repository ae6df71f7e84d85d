[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gaussrow"
version = "0.1.0"
description = "Solve linear systems from CSV files by Gaussian elimination with partial pivoting"
requires-python = ">=3.10"
keywords = ["gauss", "gaussian elimination", "linear systems", "matrix", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
]

[project.scripts]
gaussrow = "gaussrow.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gaussrow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
