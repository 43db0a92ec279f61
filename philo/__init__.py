"""Dining philosophers simulation, its command line, and small text, byte and list utilities."""

__version__ = "1.0.0"