"""Hexagonal parking lot management service."""

__version__ = "1.0.0"
