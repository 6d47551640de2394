"""Product catalog HTTP service."""

__version__ = "0.1.0"
