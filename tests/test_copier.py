"""Tests for the dotfile copier."""

import os

import pytest

from dotted.copier import (STATUS_ABSENT, STATUS_MISSING, STATUS_MODIFIED,
                           STATUS_SYNCED, copy_dotfiles, copy_entry,
                           entry_status, resolve_paths)
from dotted.manifest import ManifestEntry, ManifestError


def read_bytes(path):
    with open(path, "rb") as f:
        return f.read()


class TestResolvePaths:
    """Test resolve_paths()."""

    def test_joins_roots(self, settings):
        src, dest = resolve_paths(ManifestEntry("bashrc", ".config/bash/rc"), settings)

        assert src == os.path.join(settings.data_dir, "bashrc")
        assert dest == os.path.join(settings.dest_root, ".config/bash/rc")

    def test_absolute_destination_under_root(self, settings):
        _, dest = resolve_paths(ManifestEntry("bashrc", "/etc/bashrc"), settings)

        assert dest == os.path.join(settings.dest_root, "etc/bashrc")

    def test_destination_outside_root(self, settings):
        with pytest.raises(ManifestError, match="outside the destination root"):
            resolve_paths(ManifestEntry("bashrc", "../escaped"), settings)


class TestCopyDotfiles:
    """Test copy_dotfiles()."""

    def test_copies_byte_identical(self, settings, write_data):
        """Every destination matches its source byte for byte."""
        files = {"bashrc": b"export PS1='$ '\n", "binary": bytes(range(256))}
        write_data(settings, files, "bashrc .bashrc\nbinary .local/share/blob.bin\n")

        copied = copy_dotfiles(settings)

        assert copied == [
            os.path.join(settings.dest_root, ".bashrc"),
            os.path.join(settings.dest_root, ".local/share/blob.bin"),
        ]
        assert read_bytes(copied[0]) == files["bashrc"]
        assert read_bytes(copied[1]) == files["binary"]

    def test_creates_nested_directories(self, settings, write_data):
        write_data(settings, {"fish": b"set -x\n"}, "fish .config/fish/conf.d/config.fish\n")

        copy_dotfiles(settings)

        assert os.path.isdir(os.path.join(settings.dest_root, ".config/fish/conf.d"))

    def test_idempotent(self, settings, write_data):
        """Running twice leaves the same files as running once."""
        write_data(settings, {"vimrc": b"set nu\n"}, "vimrc .vim/vimrc\n")

        first = copy_dotfiles(settings)
        after_one = read_bytes(first[0])
        second = copy_dotfiles(settings)

        assert first == second
        assert read_bytes(second[0]) == after_one == b"set nu\n"

    def test_existing_directory_is_fine(self, settings, write_data):
        """Pre-created destination directories are not an error."""
        os.makedirs(os.path.join(settings.dest_root, ".config", "kitty"))
        write_data(settings, {"kitty": b"font_size 12\n"}, "kitty .config/kitty/kitty.conf\n")

        copy_dotfiles(settings)

        assert read_bytes(os.path.join(settings.dest_root, ".config/kitty/kitty.conf")) == b"font_size 12\n"

    def test_overwrites_existing_file(self, settings, write_data):
        dest = os.path.join(settings.dest_root, ".gitconfig")
        with open(dest, "wb") as f:
            f.write(b"old\n")
        write_data(settings, {"gitconfig": b"new\n"}, "gitconfig .gitconfig\n")

        copy_dotfiles(settings)

        assert read_bytes(dest) == b"new\n"

    def test_later_entry_wins(self, settings, write_data):
        write_data(settings, {"a": b"first\n", "b": b"second\n"}, "a .rc\nb .rc\n")

        copy_dotfiles(settings)

        assert read_bytes(os.path.join(settings.dest_root, ".rc")) == b"second\n"

    def test_missing_source_aborts(self, settings, write_data):
        """The run stops at the first missing source; earlier copies remain."""
        write_data(settings, {"a": b"a\n", "c": b"c\n"}, "a .a\nb .b\nc .c\n")

        with pytest.raises(FileNotFoundError):
            copy_dotfiles(settings)

        assert os.path.exists(os.path.join(settings.dest_root, ".a"))
        assert not os.path.exists(os.path.join(settings.dest_root, ".c"))

    def test_malformed_manifest_copies_nothing(self, settings, write_data):
        write_data(settings, {"a": b"a\n"}, "a .a\nbroken\n")

        with pytest.raises(ManifestError):
            copy_dotfiles(settings)

        assert not os.path.exists(os.path.join(settings.dest_root, ".a"))

    def test_absolute_destination_copied_under_root(self, settings, write_data):
        """A manifest line with an absolute destination writes below dest_root."""
        write_data(settings, {"bashrc": b"set -o vi\n"}, "bashrc /etc/bashrc\n")

        copied = copy_dotfiles(settings)

        assert copied == [os.path.join(settings.dest_root, "etc/bashrc")]
        assert read_bytes(copied[0]) == b"set -o vi\n"

    def test_escaping_destination_copies_nothing(self, settings, write_data, tmp_path):
        write_data(settings, {"a": b"a\n"}, "a .a\na ../escaped\n")

        with pytest.raises(ManifestError):
            copy_dotfiles(settings)

        assert not os.path.exists(os.path.join(settings.dest_root, ".a"))
        assert not os.path.exists(str(tmp_path / "escaped"))

    def test_explicit_entries(self, settings, write_data):
        """Entries can be passed in instead of read from the manifest."""
        write_data(settings, {"zshrc": b"bindkey -v\n"}, "")

        copied = copy_dotfiles(settings, [ManifestEntry("zshrc", ".zshrc")])

        assert copied == [os.path.join(settings.dest_root, ".zshrc")]

    def test_missing_manifest(self, settings):
        with pytest.raises(FileNotFoundError):
            copy_dotfiles(settings)

    @pytest.mark.skipif(os.geteuid() == 0, reason="root ignores file permissions")
    def test_permission_denied(self, settings, write_data):
        write_data(settings, {"a": b"a\n"}, "a locked/.a\n")
        locked = os.path.join(settings.dest_root, "locked")
        os.makedirs(locked)
        os.chmod(locked, 0o500)
        try:
            with pytest.raises(PermissionError):
                copy_dotfiles(settings)
        finally:
            os.chmod(locked, 0o700)


class TestEntryStatus:
    """Test entry_status()."""

    def test_states(self, settings, write_data):
        write_data(settings, {"a": b"a\n", "b": b"b\n"}, "")
        entry_a = ManifestEntry("a", ".a")
        entry_b = ManifestEntry("b", ".b")

        assert entry_status(ManifestEntry("nope", ".nope"), settings) == STATUS_MISSING
        assert entry_status(entry_a, settings) == STATUS_ABSENT

        copy_entry(entry_a, settings)
        copy_entry(entry_b, settings)
        with open(os.path.join(settings.dest_root, ".b"), "wb") as f:
            f.write(b"edited\n")

        assert entry_status(entry_a, settings) == STATUS_SYNCED
        assert entry_status(entry_b, settings) == STATUS_MODIFIED
