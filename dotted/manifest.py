#!/usr/bin/env python3
"""
Manifest parsing for the dotfile copier.

A manifest is a plain text file with one record per line:

    <name> <dest_rel>

where <name> is a file in the data directory and <dest_rel> is the
destination path relative to the destination root. Fields are separated by
any run of whitespace. Blank lines and lines starting with '#' are ignored.

Example:
    bashrc          .bashrc
    alacritty.yml   .config/alacritty/alacritty.yml
"""

import os
from dataclasses import dataclass
from typing import List


class ManifestError(Exception):
    """Exception raised for a malformed manifest."""

    pass


def escapes_root(dest_rel: str) -> bool:
    """
    True if a destination leaves the destination root once normalised.

    A leading separator does not count: "/etc/bashrc" lands at
    <dest_root>/etc/bashrc.
    """
    normalised = os.path.normpath(dest_rel.lstrip(os.sep))
    return normalised == os.pardir or normalised.startswith(os.pardir + os.sep)


@dataclass
class ManifestEntry:
    """A single source/destination pair."""

    name: str
    dest_rel: str
    line_no: int = 0


def parse_manifest(content: str) -> List[ManifestEntry]:
    """
    Parse manifest content.

    The whole manifest is validated before anything is returned, so a bad
    line aborts the run before any file is copied.

    Args:
        content: Manifest text

    Returns:
        Entries in file order

    Raises:
        ManifestError: On a line without exactly two fields, or with a
            destination that climbs out of the root with ".."
    """
    entries = []

    for line_no, line in enumerate(content.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        parts = stripped.split()
        if len(parts) != 2:
            raise ManifestError(
                f"line {line_no}: expected '<name> <dest>', got {len(parts)} field(s)"
            )

        name, dest_rel = parts
        if escapes_root(dest_rel):
            raise ManifestError(
                f"line {line_no}: {dest_rel} points outside the destination root"
            )

        entries.append(ManifestEntry(name=name, dest_rel=dest_rel, line_no=line_no))

    return entries


def read_manifest(path: str) -> List[ManifestEntry]:
    """Read and parse a manifest file."""
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    return parse_manifest(content)
