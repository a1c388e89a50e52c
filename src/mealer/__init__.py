"""mealer: chef catalog, menu, and complaint inbox services."""

__version__ = "0.1.0"
