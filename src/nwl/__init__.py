"""
NWL - compile declarative YAML pages into React components.
"""

from nwl._version import __version__

__all__ = ["__version__"]
