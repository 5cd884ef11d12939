"""Keeps CSS theme variables and utilities in sync with arbitrary-value class names."""

__all__ = ["__version__"]

__version__ = "0.1.0"
