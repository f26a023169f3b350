[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "stridedmath"
version = "0.1.0"
description = "Strided n-dimensional tensors with broadcasting arithmetic, batched matrix multiplication, matrices, vectors and random initialisers."
requires-python = ">=3.10"
dependencies = []
keywords = ["tensor", "matrix", "vector", "broadcasting", "linear algebra", "strides"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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

[tool.setuptools.packages.find]
include = ["stridedmath*"]

[tool.pytest.ini_options]
addopts = "-ra"
