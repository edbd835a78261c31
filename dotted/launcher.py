#!/usr/bin/env python3
"""
Development container launcher.

Grammar:
    dotted-shell [--godir GODIR] (build|run)

    build   docker build -t <image> .
    run     docker run --rm -it -v <cwd>:/code -v <godir>:/godir <image>

GODIR defaults to ~/go. The chosen command is printed before it runs and
the Docker process's exit status is returned.
"""

import os
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from dotted.colors import Color, colorize
from dotted.config import Settings
from dotted.executor import Executor, SubprocessExecutor, format_command

MODE_BUILD = "build"
MODE_RUN = "run"
MODES = (MODE_BUILD, MODE_RUN)

GODIR_FLAG = "--godir"

USAGE = "Expected: [--godir GODIR] [build | run]"


class UsageError(Exception):
    """Exception raised for a malformed launcher invocation."""

    pass


@dataclass
class LaunchConfig:
    """What to launch, derived from the command line."""

    mode: str
    godir: Optional[str] = None


def parse_launch_args(argv: List[str], settings: Settings) -> LaunchConfig:
    """
    Parse launcher arguments.

    Accepts exactly one argument (the mode) or three (--godir, a
    directory, the mode). The flag is only checked for run; build takes no
    options, so its first two arguments are ignored.

    Raises:
        UsageError: For any other shape
    """
    if len(argv) not in (1, 3):
        raise UsageError(USAGE)

    mode = argv[-1]
    if mode not in MODES:
        raise UsageError('Expected command to be "build" or "run"')

    if mode == MODE_BUILD:
        return LaunchConfig(mode=mode)

    if len(argv) == 3:
        if argv[0] != GODIR_FLAG:
            raise UsageError(f"Expected arg to be {GODIR_FLAG}")
        godir = argv[1]
    else:
        godir = settings.default_godir

    return LaunchConfig(mode=mode, godir=godir)


def build_command(
    launch: LaunchConfig, settings: Settings, cwd: Optional[str] = None
) -> List[str]:
    """Build the docker argument list for a launch."""
    if launch.mode == MODE_BUILD:
        return ["docker", "build", "-t", settings.image_name, "."]

    if cwd is None:
        cwd = os.getcwd()
    godir = launch.godir or settings.default_godir
    return [
        "docker",
        "run",
        "--rm",
        "-it",
        "-v",
        f"{cwd}:{settings.code_volume}",
        "-v",
        f"{godir}:{settings.go_volume}",
        settings.image_name,
    ]


def launch(
    argv: List[str],
    settings: Settings,
    executor: Optional[Executor] = None,
    out: Optional[TextIO] = None,
    cwd: Optional[str] = None,
) -> int:
    """
    Parse arguments, print the command and run it.

    Args:
        argv: Launcher arguments (without program name)
        settings: Resolved settings
        executor: Runs the command; SubprocessExecutor if None
        out: Output stream; sys.stdout if None
        cwd: Directory mounted at /code; current directory if None

    Returns:
        1 on a usage error, otherwise the Docker exit status
    """
    if out is None:
        out = sys.stdout
    if executor is None:
        executor = SubprocessExecutor()

    try:
        config = parse_launch_args(argv, settings)
    except UsageError as e:
        print(e, file=out)
        return 1

    command_argv = build_command(config, settings, cwd=cwd)
    banner = "Building ..." if config.mode == MODE_BUILD else "Running ..."

    command = colorize(format_command(command_argv), Color.RED, enabled=settings.color)
    print(f"Command: {command}", file=out)
    print(colorize(banner, Color.GREEN, bold=True, enabled=settings.color), file=out)
    out.flush()

    return executor.run(command_argv)
