"""Customer Registry: an in-memory registry of customer records."""

__version__ = "0.1.0"
