[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smoothlie"
version = "0.1.0"
description = "Lie groups, manifolds, tangent-space derivatives and cumulative splines on Lie groups"
requires-python = ">=3.10"
keywords = ["lie group", "manifold", "SO2", "SE2", "spline", "jacobian", "quadrature"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["smoothlie"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
