[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rashunal"
version = "0.0.1"
description = "Exact rational numbers in lowest terms with fixed-width text formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["rational", "fraction", "arithmetic", "gcd", "lcm"]
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
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rash = "rashunal.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rashunal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
