"""
Dotted Test Suite
=================

This package contains unit tests for the Dotted utilities.

Test Categories:
    - test_basic.py: Import tests and basic functionality
    - test_manifest.py: Manifest parsing
    - test_copier.py: Copying dotfiles into place
    - test_config.py: Settings resolution
    - test_colors.py: Terminal colours
    - test_launcher.py: Container launcher grammar and commands
    - test_cli.py: Command line entry points

Running Tests:
    pytest tests/ -v
    pytest tests/ -v --cov=dotted

Note:
    No test starts Docker; the launcher is exercised with a recording
    executor from conftest.py.
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
