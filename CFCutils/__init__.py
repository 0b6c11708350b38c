"""Dynamic choice parameters resolved from managed config files."""

__version__ = "1.0"
