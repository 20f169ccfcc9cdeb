[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lcurvekit"
version = "0.1.0"
description = "Building blocks for binary-star light curve modelling: surface elements, limb darkening, disc eclipses, data files and minimisers"
requires-python = ">=3.10"
dependencies = []
keywords = ["astronomy", "light curve", "binary stars", "eclipse", "accretion disc", "limb darkening", "simplex"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lcurvekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
