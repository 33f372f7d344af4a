"""Ticker Dashboard - single-ticker stock snapshot viewer."""

__version__ = "0.1.0"
