[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cortexsim"
version = "0.1.0"
description = "A small simulation of cortical minicolumns with complex-valued neurons, astrocyte energy support and Hebbian learning"
requires-python = ">=3.10"
dependencies = []
keywords = ["cortex", "minicolumn", "astrocyte", "hebbian", "simulation", "neural model"]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cortexsim = "cortexsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cortexsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
