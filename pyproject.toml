[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chargekit"
version = "0.1.0"
description = "Partial atomic charge calculation with empirical methods"
requires-python = ">=3.10"
keywords = [
    "chemistry",
    "partial charges",
    "electronegativity equalization",
    "EEM",
    "QEq",
    "PEOE",
    "split-charge equilibration",
]
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
    "Topic :: Scientific/Engineering :: Chemistry",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["chargekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
