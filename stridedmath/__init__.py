"""Strided n-dimensional tensors with broadcasting, matrices, vectors and random samples."""

__version__ = "0.1.0"

__all__ = ["broadcast", "dist", "errors", "layout", "linalg", "matrix", "tensor", "vector"]