[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bemkit"
version = "1.0.0"
description = "Numerical helpers for boundary element computations: complex matrices, interval supports, plane waves, the Hankel function and a text progress bar"
requires-python = ">=3.10"
keywords = ["boundary element method", "numerical analysis", "linear algebra", "hankel", "progress bar"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bemkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
