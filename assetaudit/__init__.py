"""Static audit of declared, present and referenced project assets."""

__version__ = "0.1.0"
