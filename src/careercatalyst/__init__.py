"""careercatalyst: incremental CV editor with a centralized document store."""

__version__ = "0.1.0"
