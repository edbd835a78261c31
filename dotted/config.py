#!/usr/bin/env python3
"""
Configuration for Dotted.

Settings are resolved in layers, later layers winning:

    1. Built-in defaults (see dotted.utils)
    2. YAML config file (~/.dotted/dotted.yaml or ~/.config/dotted/dotted.yaml)
    3. Environment variables (DOTTED_*, NO_COLOR)
    4. Command-line flags

Example config file:

    dataDir: /srv/dotfiles
    manifest: /srv/dotfiles/loc.dat
    destRoot: /home/me
    image: redocmd/dotted
    color: false
"""

import os
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Optional

import yaml

from dotted.utils import (CODE_VOLUME, DEFAULT_DATA_DIR, DEFAULT_DEST_ROOT,
                          DEFAULT_IMAGE, GO_VOLUME, config_search_paths,
                          default_godir, default_manifest, env_flag)


class ConfigError(Exception):
    """Exception raised for invalid configuration."""

    pass


@dataclass
class Settings:
    """Resolved settings shared by the copier and the launcher."""

    data_dir: str = DEFAULT_DATA_DIR
    manifest_path: str = ""
    dest_root: str = DEFAULT_DEST_ROOT
    image_name: str = DEFAULT_IMAGE
    code_volume: str = CODE_VOLUME
    go_volume: str = GO_VOLUME
    default_godir: str = field(default_factory=default_godir)
    color: bool = True

    def __post_init__(self):
        if not self.manifest_path:
            self.manifest_path = default_manifest(self.data_dir)


# YAML key -> Settings attribute
FILE_KEYS = {
    "dataDir": "data_dir",
    "manifest": "manifest_path",
    "destRoot": "dest_root",
    "image": "image_name",
    "godir": "default_godir",
    "color": "color",
}

ENV_KEYS = {
    "DOTTED_DATA_DIR": "data_dir",
    "DOTTED_MANIFEST": "manifest_path",
    "DOTTED_DEST_ROOT": "dest_root",
    "DOTTED_IMAGE": "image_name",
}


def find_config_file() -> Optional[str]:
    """Return the first existing config file on the search path."""
    for path in config_search_paths():
        if os.path.isfile(path):
            return path
    return None


def read_config_file(path: str) -> Dict[str, Any]:
    """
    Read and validate a YAML config file.

    Args:
        path: Path to the config file

    Returns:
        Mapping of Settings attribute names to values

    Raises:
        ConfigError: If the file cannot be parsed or has unknown keys
    """
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"failed to read config {path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to parse config {path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"invalid config {path}: expected a mapping")

    values = {}
    for key, value in data.items():
        attr = FILE_KEYS.get(key)
        if attr is None:
            raise ConfigError(f"invalid config {path}: unknown key {key!r}")
        if attr == "color":
            if not isinstance(value, bool):
                raise ConfigError(f"invalid config {path}: color must be true or false")
        elif not isinstance(value, str) or not value:
            raise ConfigError(f"invalid config {path}: {key} must be a non-empty string")
        values[attr] = value
    return values


def read_environment() -> Dict[str, Any]:
    """Collect overrides from DOTTED_* variables and NO_COLOR."""
    values: Dict[str, Any] = {}
    for name, attr in ENV_KEYS.items():
        value = os.environ.get(name)
        if value:
            values[attr] = value
    if env_flag("NO_COLOR"):
        values["color"] = False
    return values


def load_settings(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Settings:
    """
    Build Settings from defaults, config file, environment and overrides.

    Args:
        config_path: Explicit config file (must exist); searched for if None
        overrides: Values from command-line flags; None values are ignored

    Returns:
        Settings instance
    """
    values: Dict[str, Any] = {}

    if config_path is not None:
        if not os.path.isfile(config_path):
            raise ConfigError(f"config file not found: {config_path}")
        values.update(read_config_file(config_path))
    else:
        found = find_config_file()
        if found:
            values.update(read_config_file(found))

    values.update(read_environment())

    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(Settings)}
    unknown = set(values) - known
    if unknown:
        raise ConfigError(f"unknown settings: {', '.join(sorted(unknown))}")

    # A new data directory moves the default manifest with it
    if "data_dir" in values and "manifest_path" not in values:
        values["manifest_path"] = default_manifest(values["data_dir"])

    return replace(Settings(), **values)
