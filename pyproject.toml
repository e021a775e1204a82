[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cabernet"
version = "0.1.0"
description = "Float tensors that carry gradients, a negative log-likelihood loss and feature normalizers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["tensor", "autograd", "gradient", "neural-network", "loss", "normalization"]
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
packages = ["cabernet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
