[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vectorflow"
version = "0.1.0"
description = "A small fully connected neural network with backpropagation, activations and matrix helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["neural-network", "backpropagation", "machine-learning", "perceptron"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
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
vectorflow-evaluate = "vectorflow.evaluation:main"
vectorflow-demo = "vectorflow.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["vectorflow"]

[tool.pytest.ini_options]
addopts = "-ra"
