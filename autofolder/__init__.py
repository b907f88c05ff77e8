"""AutoFolder: organize files into folders by shared name prefix."""

from .version import __version__

__all__ = ["__version__"]
