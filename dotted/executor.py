#!/usr/bin/env python3
"""
Process execution for Dotted.

Commands are built as argument lists and handed to an Executor. The default
SubprocessExecutor runs them with the terminal inherited, so interactive
containers work, and waits without a timeout.
"""

import shlex
import subprocess
from typing import List


def format_command(argv: List[str]) -> str:
    """Render an argument list as a shell command line."""
    return shlex.join(argv)


class Executor:
    """Runs a command and returns its exit status."""

    def run(self, argv: List[str]) -> int:
        raise NotImplementedError


class SubprocessExecutor(Executor):
    """
    Execute commands as child processes.

    Example:
        executor = SubprocessExecutor()
        status = executor.run(["docker", "build", "-t", "redocmd/dotted", "."])
    """

    def run(self, argv: List[str]) -> int:
        """
        Run a command, inheriting stdin/stdout/stderr.

        Raises:
            FileNotFoundError: If the executable is not on PATH
        """
        result = subprocess.run(argv)
        return result.returncode
