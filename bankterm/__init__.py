"""Terminal banking system that keeps accounts in a plain text file."""

__version__ = "0.1.0"