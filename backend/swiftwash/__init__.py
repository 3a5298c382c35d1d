"""SwiftWash backend: smart order ID generation."""

__version__ = "0.1.0"
