"""Hierarchical search filters for a photo library."""

__version__ = "0.1.0"
