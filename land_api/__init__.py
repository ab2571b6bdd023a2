"""Land Management API - HTTP facade over the land tokenization contract."""

__version__ = "1.0.0"
