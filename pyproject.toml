[build-system]
requires = ["setuptools>=68", "wheel"]
build-backend = "setuptools.build_meta"

[project]
name = "flowshop-sa"
version = "0.1.0"
description = "Simulated annealing for the two-machine no-wait flow shop with machine downtimes, minimising maximum lateness"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "scheduling",
    "flow shop",
    "no-wait",
    "simulated annealing",
    "lateness",
    "metaheuristics",
    "operations research",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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

[project.scripts]
flowshop-sa-experiment = "flowshop_sa.experiment:main"
flowshop-sa-averages = "flowshop_sa.averages:main"

[tool.setuptools]
packages = ["flowshop_sa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
