"""Tests for l10n_cache.i18n.store module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from l10n_cache.i18n import ArtifactStore, LocalFileSystem


class TestLocalFileSystem:
    """Tests for LocalFileSystem."""

    @pytest.fixture
    def fs(self):
        return LocalFileSystem()

    def test_exists(self, fs, tmp_path):
        path = tmp_path / "a.json"
        assert fs.exists(path) is False

        path.write_bytes(b"{}")
        assert fs.exists(path) is True

    def test_exists_is_false_for_directories(self, fs, tmp_path):
        assert fs.exists(tmp_path) is False

    def test_write_then_read(self, fs, tmp_path):
        path = tmp_path / "a.json"

        assert fs.write(path, b"payload") is True
        assert fs.read(path) == b"payload"

    def test_write_replaces_existing_file(self, fs, tmp_path):
        path = tmp_path / "a.json"
        path.write_bytes(b"old")

        assert fs.write(path, b"new") is True
        assert path.read_bytes() == b"new"

    def test_write_leaves_no_temporary_files(self, fs, tmp_path):
        fs.write(tmp_path / "a.json", b"payload")

        assert [p.name for p in tmp_path.iterdir()] == ["a.json"]

    def test_write_to_missing_directory_returns_false(self, fs, tmp_path):
        assert fs.write(tmp_path / "missing" / "a.json", b"payload") is False

    def test_write_failure_keeps_previous_content(self, fs, tmp_path):
        """A failed replace leaves the old file and no temporary file behind."""
        path = tmp_path / "a.json"
        path.write_bytes(b"old")

        with patch("l10n_cache.i18n.store.os.replace", side_effect=OSError("disk full")):
            assert fs.write(path, b"new") is False

        assert path.read_bytes() == b"old"
        assert [p.name for p in tmp_path.iterdir()] == ["a.json"]

    def test_read_missing_raises(self, fs, tmp_path):
        with pytest.raises(FileNotFoundError):
            fs.read(tmp_path / "missing.json")

    def test_delete(self, fs, tmp_path):
        path = tmp_path / "a.json"
        path.write_bytes(b"{}")

        assert fs.delete(path) is True
        assert not path.exists()

    def test_delete_missing_returns_false(self, fs, tmp_path):
        assert fs.delete(tmp_path / "missing.json") is False

    def test_modified_time_whole_seconds(self, fs, tmp_path):
        path = tmp_path / "a.mo"
        path.write_bytes(b"")
        os.utime(path, (1_700_000_000.75, 1_700_000_000.75))

        assert fs.modified_time(path) == 1_700_000_000

    def test_modified_time_missing_raises(self, fs, tmp_path):
        with pytest.raises(FileNotFoundError):
            fs.modified_time(tmp_path / "missing.mo")


class TestArtifactStore:
    """Tests for ArtifactStore."""

    def test_artifact_path_swaps_extension(self, fake_fs):
        store = ArtifactStore(fake_fs)

        assert store.artifact_path("/l10n/default-fr_FR.mo") == Path(
            "/l10n/default-fr_FR.json"
        )

    def test_artifact_path_only_swaps_last_extension(self, fake_fs):
        """Only the final suffix changes, even if ".mo" appears earlier."""
        store = ArtifactStore(fake_fs)

        assert store.artifact_path("/l10n/plugin.mo.d/fr_FR.mo") == Path(
            "/l10n/plugin.mo.d/fr_FR.json"
        )

    def test_artifact_path_custom_extension(self, fake_fs):
        store = ArtifactStore(fake_fs, extension=".l10n.json")

        assert store.artifact_path("/l10n/fr_FR.mo") == Path("/l10n/fr_FR.l10n.json")

    def test_write_and_read_delegate_to_filesystem(self, fake_fs):
        store = ArtifactStore(fake_fs)

        assert store.write("/l10n/fr_FR.json", b"{}") is True
        assert store.exists("/l10n/fr_FR.json") is True
        assert store.read("/l10n/fr_FR.json") == b"{}"
        assert fake_fs.writes == ["/l10n/fr_FR.json"]

    def test_write_failure_reported(self, fake_fs):
        fake_fs.fail_writes = True
        store = ArtifactStore(fake_fs)

        assert store.write("/l10n/fr_FR.json", b"{}") is False
        assert store.exists("/l10n/fr_FR.json") is False

    def test_delete(self, fake_fs):
        fake_fs.put("/l10n/fr_FR.json", b"{}")
        store = ArtifactStore(fake_fs)

        assert store.delete("/l10n/fr_FR.json") is True
        assert store.exists("/l10n/fr_FR.json") is False

    def test_catalog_mtime(self, fake_fs):
        fake_fs.put("/l10n/fr_FR.mo", b"", mtime=123)
        store = ArtifactStore(fake_fs)

        assert store.catalog_mtime("/l10n/fr_FR.mo") == 123

    def test_catalog_mtime_missing_raises(self, fake_fs):
        with pytest.raises(FileNotFoundError):
            ArtifactStore(fake_fs).catalog_mtime("/l10n/missing.mo")
