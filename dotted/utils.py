#!/usr/bin/env python3
"""
Utility functions for Dotted.

Provides:
- Default locations (data directory, manifest, destination root)
- Docker image and volume defaults
- Path helpers

Default Locations
=================

The copier reads its manifest from the data directory and writes below the
destination root:

    /root/data/loc.dat      manifest, one "<name> <dest_rel>" pair per line
    /root/data/<name>       source files
    /root/<dest_rel>        destinations

Each default can be overridden from the environment:

    DOTTED_DATA_DIR     data directory
    DOTTED_MANIFEST     manifest path (defaults to <data dir>/loc.dat)
    DOTTED_DEST_ROOT    destination root
    DOTTED_IMAGE        image used by the shell launcher
"""

import os
from typing import List

# Copier defaults
DEFAULT_DATA_DIR = "/root/data"
MANIFEST_NAME = "loc.dat"
DEFAULT_DEST_ROOT = "/root"

# Launcher defaults
DEFAULT_IMAGE = "redocmd/dotted"
CODE_VOLUME = "/code"
GO_VOLUME = "/godir"

# Config file search path, relative to $HOME
CONFIG_NAME = "dotted.yaml"
CONFIG_DIRS = [".dotted", os.path.join(".config", "dotted")]


def home_dir() -> str:
    """Get the current user's home directory."""
    return os.path.expanduser("~")


def default_godir() -> str:
    """Go workspace mounted into the container when --godir is not given."""
    return os.path.join(home_dir(), "go")


def default_manifest(data_dir: str) -> str:
    """Get the manifest path inside a data directory."""
    return os.path.join(data_dir, MANIFEST_NAME)


def config_search_paths() -> List[str]:
    """Candidate config files, in lookup order."""
    home = home_dir()
    return [os.path.join(home, d, CONFIG_NAME) for d in CONFIG_DIRS]


def ensure_parent(path: str) -> str:
    """
    Create all ancestor directories of a path.

    Returns:
        The parent directory
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    return parent


def env_flag(name: str) -> bool:
    """True if an environment variable is set to a non-empty value."""
    return bool(os.environ.get(name))
