[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atomregion"
version = "0.1.0"
description = "Geometric volumes and simulation-region bookkeeping for atom simulations"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["physics", "simulation", "atoms", "geometry", "cold atoms"]
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
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["atomregion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
