"""Residential lease contract generator"""

__version__ = "0.1.0"
