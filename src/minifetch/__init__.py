"""minifetch - Minimal system information display."""

__version__ = "0.1.0"
