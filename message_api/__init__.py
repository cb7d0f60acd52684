"""Organization-scoped message API."""

__version__ = "1.0.0"
