"""Galleria - folder image viewer with a fit/zoom viewport compositor."""

__version__ = "0.1.0"
