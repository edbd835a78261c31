"""
Dotted: dotfile copier and development container launcher.

This package provides:
- A manifest-driven copier that puts dotfiles in place
- A launcher that builds and runs the development container with Docker

License: MIT
"""

__version__ = "1.0.0"
__all__ = [
    "Settings",
    "ManifestEntry",
    "copy_dotfiles",
    "launch",
]

from dotted.config import Settings
from dotted.copier import copy_dotfiles
from dotted.launcher import launch
from dotted.manifest import ManifestEntry
