"""Shared fixtures for the Dotted tests."""

import os

import pytest

from dotted.config import Settings
from dotted.executor import Executor


class RecordingExecutor(Executor):
    """Executor that records commands instead of running them."""

    def __init__(self, returncode: int = 0):
        self.returncode = returncode
        self.commands = []

    def run(self, argv):
        self.commands.append(list(argv))
        return self.returncode


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep the real home directory and DOTTED_* variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in (
        "DOTTED_DATA_DIR",
        "DOTTED_MANIFEST",
        "DOTTED_DEST_ROOT",
        "DOTTED_IMAGE",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def executor():
    return RecordingExecutor()


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a temporary data directory and destination root."""
    data_dir = tmp_path / "data"
    dest_root = tmp_path / "root"
    data_dir.mkdir()
    dest_root.mkdir()
    return Settings(
        data_dir=str(data_dir),
        dest_root=str(dest_root),
        default_godir=str(tmp_path / "home" / "go"),
    )


@pytest.fixture
def write_data():
    """Create source files and a manifest in the settings' data directory."""

    def write(settings, files, manifest):
        for name, content in files.items():
            path = os.path.join(settings.data_dir, name)
            with open(path, "wb") as f:
                f.write(content)
        with open(settings.manifest_path, "w") as f:
            f.write(manifest)

    return write
