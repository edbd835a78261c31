#!/usr/bin/env python3
"""
Command Line Interface for Dotted.

Provides commands:
    dotted copy                        - Copy dotfiles listed in the manifest
    dotted list                        - Show manifest entries and their status
    dotted version                     - Version information

The copier is also installed as dotted-copy. The container launcher is
installed as dotted-shell:

    dotted-shell [--godir DIR] build    - Build the development image
    dotted-shell [--godir DIR] run      - Run the development container
"""

import argparse
import json
import platform
import sys
from typing import List, Optional

from dotted import __version__
from dotted.config import Settings, load_settings


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all commands and options."""
    parser = argparse.ArgumentParser(
        prog="dotted",
        description="Dotted: dotfile copier and development container launcher",
    )

    # Global options
    parser.add_argument(
        "--version", "-V", action="version", version=f"Dotted {__version__}"
    )
    parser.add_argument("--config", "-c", help="Path to dotted.yaml")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # =========================================================================
    # copy command
    # =========================================================================
    copy_parser = subparsers.add_parser("copy", help="Copy dotfiles into place")
    add_copy_arguments(copy_parser)

    # =========================================================================
    # list command
    # =========================================================================
    list_parser = subparsers.add_parser("list", help="List manifest entries")
    add_location_arguments(list_parser)
    list_parser.add_argument(
        "--format",
        "-f",
        choices=["table", "json"],
        default="table",
        help="Output format",
    )

    # =========================================================================
    # version command
    # =========================================================================
    version_parser = subparsers.add_parser("version", help="Show version information")
    version_parser.add_argument(
        "--format", "-f", choices=["text", "json"], default="text", help="Output format"
    )

    return parser


def add_location_arguments(parser: argparse.ArgumentParser) -> None:
    """Options that locate the manifest, sources and destinations."""
    parser.add_argument("--manifest", "-m", help="Manifest file")
    parser.add_argument("--data-dir", "-d", help="Directory holding source files")
    parser.add_argument("--dest-root", "-r", help="Root that destinations are relative to")


def add_copy_arguments(parser: argparse.ArgumentParser) -> None:
    add_location_arguments(parser)
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Print each copied file"
    )


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Load settings, applying command-line overrides."""
    overrides = {
        "manifest_path": getattr(args, "manifest", None),
        "data_dir": getattr(args, "data_dir", None),
        "dest_root": getattr(args, "dest_root", None),
    }
    return load_settings(getattr(args, "config", None), overrides)


# =============================================================================
# Command Handlers
# =============================================================================


def cmd_copy(args: argparse.Namespace) -> int:
    """Handle copy command."""
    from dotted.copier import copy_dotfiles

    settings = resolve_settings(args)
    copied = copy_dotfiles(settings)

    if args.verbose:
        for dest in copied:
            print(f"Copied: {dest}")

    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Handle list command."""
    from dotted.copier import entry_status, resolve_paths
    from dotted.manifest import read_manifest

    settings = resolve_settings(args)
    entries = read_manifest(settings.manifest_path)

    rows = []
    for entry in entries:
        src, dest = resolve_paths(entry, settings)
        rows.append(
            {
                "name": entry.name,
                "source": src,
                "destination": dest,
                "status": entry_status(entry, settings),
            }
        )

    if args.format == "json":
        print(json.dumps(rows, indent=2))
        return 0

    name_width = max([len("NAME")] + [len(r["name"]) for r in rows]) + 2
    print(f"{'NAME':<{name_width}} {'STATUS':<10} {'DESTINATION'}")
    for row in rows:
        print(f"{row['name']:<{name_width}} {row['status']:<10} {row['destination']}")

    return 0


def cmd_shell(args: argparse.Namespace) -> int:
    """Run the container launcher."""
    from dotted.launcher import launch

    settings = resolve_settings(args)
    return launch(args.args, settings)


def cmd_version(args: argparse.Namespace) -> int:
    """Handle version command."""
    version_info = {
        "version": __version__,
        "python_version": platform.python_version(),
        "os": platform.system(),
        "arch": platform.machine(),
    }

    if args.format == "json":
        print(json.dumps(version_info, indent=2))
    else:
        print(f"Dotted version {__version__}")
        print(f"Python version {platform.python_version()}")
        print(f"OS/Arch: {platform.system()}/{platform.machine()}")

    return 0


# =============================================================================
# Main Entry Points
# =============================================================================


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    # Dispatch to command handler
    handlers = {
        "copy": cmd_copy,
        "list": cmd_list,
        "version": cmd_version,
    }

    handler = handlers.get(args.command)
    if handler:
        return run_handler(handler, args)
    else:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1


def run_handler(handler, args: argparse.Namespace) -> int:
    """Run a command handler, reporting errors the same way for every command."""
    try:
        return handler(args)
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130
    except Exception as e:
        if getattr(args, "debug", False):
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


def copy_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for dotted-copy."""
    parser = argparse.ArgumentParser(
        prog="dotted-copy", description="Copy dotfiles listed in the manifest"
    )
    parser.add_argument("--config", "-c", help="Path to dotted.yaml")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    add_copy_arguments(parser)
    args = parser.parse_args(argv)
    return run_handler(cmd_copy, args)


def shell_main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for dotted-shell.

    Arguments are not run through argparse so the launcher grammar,
    including exit status 1 on misuse, is kept exactly.
    """
    if argv is None:
        argv = sys.argv[1:]
    args = argparse.Namespace(args=list(argv), config=None, debug=False)
    return run_handler(cmd_shell, args)


if __name__ == "__main__":
    sys.exit(main())
