"""Stockbook: local inventory, sales and debt tracking."""

__version__ = "1.0.0"
