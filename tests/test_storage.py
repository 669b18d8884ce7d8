"""Unit tests for sound_library/services/storage.py."""

import shutil

import pytest

from sound_library.services import storage
from sound_library.services.storage import (
    CopyFailed,
    DirectoryUnavailable,
    EnumerationFailed,
    RemoveFailed,
    SoundAssetStore,
)

from conftest import write_sound


@pytest.fixture
def fail_copies_into(monkeypatch):
    """Make shutil.copyfile fail for destinations inside a given directory."""
    real_copyfile = shutil.copyfile

    def install(directory):
        def copyfile(src, dst, *args, **kwargs):
            if str(dst).startswith(str(directory)):
                raise PermissionError(13, "Permission denied", str(dst))
            return real_copyfile(src, dst, *args, **kwargs)

        monkeypatch.setattr(storage.shutil, "copyfile", copyfile)

    return install


class TestSave:
    """Tests for SoundAssetStore.save()."""

    def test_copies_into_both_directories(self, store, primary_dir, shared_dir, imports_dir):
        """The file should land in both directories with identical bytes."""
        source = write_sound(imports_dir, "x.caf", b"\x00caff-data\xff")

        result = store.save(source)

        assert result.succeeded
        assert result.mirror_error is None
        assert result.path == primary_dir / "x.caf"
        assert (primary_dir / "x.caf").read_bytes() == source.read_bytes()
        assert (shared_dir / "x.caf").read_bytes() == source.read_bytes()

    def test_creates_directories_lazily(self, store, primary_dir, shared_dir, imports_dir):
        """Neither directory exists until first needed."""
        assert not primary_dir.exists()
        assert not shared_dir.exists()

        store.save(write_sound(imports_dir, "x.caf"))

        assert primary_dir.is_dir()
        assert shared_dir.is_dir()

    def test_overwrites_existing_files(self, store, primary_dir, shared_dir, imports_dir):
        """Importing the same name again should replace both copies."""
        write_sound(primary_dir, "x.caf", b"old")
        write_sound(shared_dir, "x.caf", b"old")
        source = write_sound(imports_dir, "x.caf", b"new")

        assert store.save(source).succeeded
        assert (primary_dir / "x.caf").read_bytes() == b"new"
        assert (shared_dir / "x.caf").read_bytes() == b"new"

    def test_missing_source_fails_without_mirror(self, store, shared_dir, imports_dir):
        """A failed primary copy should skip the mirror entirely."""
        result = store.save(imports_dir / "missing.caf")

        assert not result.succeeded
        assert isinstance(result.error, CopyFailed)
        assert result.path is None
        assert not (shared_dir / "missing.caf").exists()

    def test_primary_failure_never_touches_shared(
        self, store, primary_dir, shared_dir, imports_dir, fail_copies_into
    ):
        """Primary copy failure should leave the shared directory untouched."""
        fail_copies_into(primary_dir)
        source = write_sound(imports_dir, "x.caf")

        result = store.save(source)

        assert isinstance(result.error, CopyFailed)
        assert not (shared_dir / "x.caf").exists()

    def test_mirror_failure_still_succeeds(
        self, store, primary_dir, shared_dir, imports_dir, fail_copies_into
    ):
        """A failed mirror is recorded but the save counts as complete."""
        fail_copies_into(shared_dir)
        source = write_sound(imports_dir, "x.caf")

        result = store.save(source)

        assert result.succeeded
        assert isinstance(result.mirror_error, CopyFailed)
        assert (primary_dir / "x.caf").exists()
        assert not (shared_dir / "x.caf").exists()

    def test_unavailable_primary_directory(self, tmp_path, imports_dir):
        """A primary directory that cannot be created fails the save."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        store = SoundAssetStore(blocker / "Sounds", tmp_path / "shared")

        result = store.save(write_sound(imports_dir, "x.caf"))

        assert isinstance(result.error, DirectoryUnavailable)
        assert not (tmp_path / "shared" / "x.caf").exists()

    def test_unavailable_shared_directory(self, tmp_path, primary_dir, imports_dir):
        """A shared directory that cannot be created only affects the mirror."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        store = SoundAssetStore(primary_dir, blocker / "Sounds")

        result = store.save(write_sound(imports_dir, "x.caf"))

        assert result.succeeded
        assert isinstance(result.mirror_error, DirectoryUnavailable)
        assert (primary_dir / "x.caf").exists()

    def test_no_shared_container(self, primary_dir, imports_dir):
        """Without a shared container only the primary copy is made."""
        store = SoundAssetStore(primary_dir, None)

        result = store.save(write_sound(imports_dir, "x.caf"))

        assert result.succeeded
        assert result.mirror_error is None
        assert store.shared_dir is None


class TestDelete:
    """Tests for SoundAssetStore.delete()."""

    def test_removes_from_both_directories(self, store, primary_dir, shared_dir, imports_dir):
        """Deleting should remove the primary file and its mirror."""
        store.save(write_sound(imports_dir, "x.caf"))

        result = store.delete(primary_dir / "x.caf")

        assert result.succeeded
        assert result.mirror_error is None
        assert store.list_files(primary_dir, ".caf") == []
        assert not (shared_dir / "x.caf").exists()

    def test_missing_mirror_is_not_an_error(self, store, primary_dir, shared_dir):
        """An already-absent shared copy should not fail the delete."""
        write_sound(primary_dir, "x.caf")
        shared_dir.mkdir(parents=True)

        result = store.delete(primary_dir / "x.caf")

        assert result.succeeded
        assert result.mirror_error is None
        assert not (primary_dir / "x.caf").exists()

    def test_missing_primary_is_reported(self, store, primary_dir, shared_dir):
        """A missing primary file is a RemoveFailed, but the mirror is still cleaned."""
        write_sound(shared_dir, "x.caf")

        result = store.delete(primary_dir / "x.caf")

        assert isinstance(result.error, RemoveFailed)
        assert not (shared_dir / "x.caf").exists()

    def test_only_filename_is_used(self, store, primary_dir, bundled_dir):
        """Deleting a path outside the primary directory must not touch it."""
        result = store.delete(bundled_dir / "alarm.caf")

        assert not result.succeeded
        assert (bundled_dir / "alarm.caf").exists()

    def test_mirror_removal_failure_is_recorded(self, store, primary_dir, shared_dir):
        """A shared entry that cannot be removed is reported on the result."""
        write_sound(primary_dir, "x.caf")
        (shared_dir / "x.caf").mkdir(parents=True)

        result = store.delete(primary_dir / "x.caf")

        assert result.succeeded
        assert isinstance(result.mirror_error, RemoveFailed)

    def test_creates_shared_directory_lazily(self, store, primary_dir, shared_dir):
        """Deleting before the shared directory exists creates it and succeeds."""
        write_sound(primary_dir, "x.caf")
        assert not shared_dir.exists()

        result = store.delete(primary_dir / "x.caf")

        assert result.succeeded
        assert result.mirror_error is None
        assert shared_dir.is_dir()

    def test_unavailable_shared_directory(self, tmp_path, primary_dir):
        """A shared directory that cannot be created is a DirectoryUnavailable."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        store = SoundAssetStore(primary_dir, blocker / "Sounds")
        write_sound(primary_dir, "x.caf")

        result = store.delete(primary_dir / "x.caf")

        assert result.succeeded
        assert isinstance(result.mirror_error, DirectoryUnavailable)
        assert not (primary_dir / "x.caf").exists()


class TestListFiles:
    """Tests for SoundAssetStore.list_files() and scan()."""

    def test_filters_by_suffix(self, store, bundled_dir):
        """Only files ending with the suffix should be returned."""
        names = sorted(path.name for path in store.list_files(bundled_dir, ".caf"))
        assert names == ["alarm.caf", "bell.caf"]

    def test_missing_directory_is_empty(self, store, tmp_path):
        """An unreadable directory should produce an empty list, not an error."""
        assert store.list_files(tmp_path / "nowhere", ".caf") == []

    def test_scan_reports_enumeration_error(self, store, tmp_path):
        """scan() should expose the swallowed error as a value."""
        files, error = store.scan(tmp_path / "nowhere", ".caf")

        assert files == []
        assert isinstance(error, EnumerationFailed)


class TestMirrorStatus:
    """Tests for SoundAssetStore.mirror_status()."""

    def test_in_sync_after_saves(self, store, imports_dir):
        """Saved files should appear in both directories."""
        store.save(write_sound(imports_dir, "a.caf"))
        store.save(write_sound(imports_dir, "b.caf"))

        assert store.mirror_status(".caf").in_sync

    def test_reports_divergence_without_repairing(self, store, primary_dir, shared_dir):
        """Divergent files are reported and left in place."""
        write_sound(primary_dir, "only-primary.caf")
        write_sound(shared_dir, "only-shared.caf")

        status = store.mirror_status(".caf")

        assert status.primary_only == ["only-primary.caf"]
        assert status.shared_only == ["only-shared.caf"]
        assert not (shared_dir / "only-primary.caf").exists()
        assert (shared_dir / "only-shared.caf").exists()
