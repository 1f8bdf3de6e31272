"""Responsive-design checks for static site pages."""

__version__ = "0.1.0"
