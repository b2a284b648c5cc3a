[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "motionplan"
version = "0.1.0"
description = "Planar robot motion planning: polygon geometry, weighted graphs with A* search, bug algorithms, potential-field gradient descent and baseline multi-agent planners"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "motion planning",
    "robotics",
    "A*",
    "graph search",
    "bug algorithm",
    "potential field",
    "gradient descent",
    "minkowski sum",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["motionplan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
