"""Profit and loss calculator for rideshare drivers."""

__version__ = "0.1.0"

__all__ = ["__version__"]
