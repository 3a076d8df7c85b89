"""Triangle Test Generator - boundary value and worst case tables for width/height."""

__version__ = "1.0.0"
