[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strobemers"
version = "0.1.0"
description = "MinStrobes and RandStrobes: strobemer seeds for DNA and RNA sequences"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bioinformatics",
    "strobemers",
    "minstrobes",
    "randstrobes",
    "k-mer",
    "seeding",
    "sequence-analysis",
    "nthash",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
strobemers = "strobemers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["strobemers"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
