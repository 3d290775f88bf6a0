[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "densematrix"
version = "1.0.0"
description = "Dense real-valued matrices: arithmetic, transpose, minors, determinant, cofactors and inverse."
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "linear algebra", "determinant", "inverse", "cofactor"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["densematrix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
