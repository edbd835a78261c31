#!/usr/bin/env python3
"""
Dotfile copier.

Copies every file named in the manifest from the data directory to its
place under the destination root:

    src  = <data_dir>/<name>
    dest = <dest_root>/<dest_rel>

Missing parent directories of dest are created. Existing files at dest are
overwritten. The run stops at the first failure and leaves earlier copies
in place.
"""

import filecmp
import os
import shutil
from typing import List, Optional, Tuple

from dotted.config import Settings
from dotted.manifest import (ManifestEntry, ManifestError, escapes_root,
                             read_manifest)
from dotted.utils import ensure_parent

# Entry states reported by entry_status()
STATUS_MISSING = "missing"
STATUS_ABSENT = "absent"
STATUS_SYNCED = "synced"
STATUS_MODIFIED = "modified"


def resolve_paths(entry: ManifestEntry, settings: Settings) -> Tuple[str, str]:
    """
    Get (source, destination) paths for a manifest entry.

    Raises:
        ManifestError: If the destination leaves dest_root
    """
    if escapes_root(entry.dest_rel):
        raise ManifestError(f"{entry.dest_rel} points outside the destination root")
    src = os.path.join(settings.data_dir, entry.name)
    # Absolute destinations are still placed under dest_root
    dest = os.path.join(settings.dest_root, entry.dest_rel.lstrip(os.sep))
    return src, dest


def copy_entry(entry: ManifestEntry, settings: Settings) -> str:
    """
    Copy one manifest entry into place.

    Args:
        entry: Manifest entry
        settings: Resolved settings

    Returns:
        Destination path

    Raises:
        FileNotFoundError: If the source file does not exist
        PermissionError: If a directory or the file cannot be written
    """
    src, dest = resolve_paths(entry, settings)
    ensure_parent(dest)
    shutil.copy(src, dest)
    return dest


def copy_dotfiles(
    settings: Settings, entries: Optional[List[ManifestEntry]] = None
) -> List[str]:
    """
    Copy every manifest entry.

    Args:
        settings: Resolved settings
        entries: Entries to copy; read from settings.manifest_path if None

    Returns:
        Destination paths in the order they were written
    """
    if entries is None:
        entries = read_manifest(settings.manifest_path)

    copied = []
    for entry in entries:
        copied.append(copy_entry(entry, settings))
    return copied


def entry_status(entry: ManifestEntry, settings: Settings) -> str:
    """Compare an entry's source against its destination."""
    src, dest = resolve_paths(entry, settings)
    if not os.path.isfile(src):
        return STATUS_MISSING
    if not os.path.exists(dest):
        return STATUS_ABSENT
    if filecmp.cmp(src, dest, shallow=False):
        return STATUS_SYNCED
    return STATUS_MODIFIED
