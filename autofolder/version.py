"""Version information for autofolder."""

__version__ = "1.0.0"
