[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "talawa"
version = "0.1.0"
description = "Float32 matrices, activations, weight initializers, optimizers and small reinforcement-learning environments"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "machine learning",
    "neural network",
    "reinforcement learning",
    "matrix",
    "optimizer",
    "environment",
]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["talawa"]

[tool.pytest.ini_options]
addopts = "-ra"
