"""profilekit — availability-aware wrappers for developer CLI tools."""

__version__ = "0.1.0"
