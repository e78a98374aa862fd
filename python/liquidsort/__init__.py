"""Liquid sort puzzle engine."""

__version__ = "1.0.0"
