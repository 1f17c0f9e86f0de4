[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakeai"
version = "0.1.0"
description = "Evolve small neural networks that learn to play Snake with a genetic algorithm"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["snake", "genetic-algorithm", "neuroevolution", "neural-network"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
snakeai = "snakeai.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["snakeai"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
