"""Local sound file storage with shared-container mirroring."""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


class SoundStoreError(Exception):
    """Base class for sound storage failures.

    These are never raised out of the store; they are returned as values
    on the operation results so callers decide what to ignore.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DirectoryUnavailable(SoundStoreError):
    """A sounds directory could not be created or accessed."""


class CopyFailed(SoundStoreError):
    """A sound file could not be copied."""


class RemoveFailed(SoundStoreError):
    """A sound file could not be removed."""


class EnumerationFailed(SoundStoreError):
    """A directory listing could not be read."""


@dataclass
class SaveResult:
    """Outcome of importing one sound file.

    ``succeeded`` only reflects the primary copy; a failed mirror is
    reported in ``mirror_error`` but does not fail the save.
    """

    path: Path | None = None
    error: SoundStoreError | None = None
    mirror_error: SoundStoreError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class DeleteResult:
    """Outcome of deleting one sound file."""

    error: SoundStoreError | None = None
    mirror_error: SoundStoreError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class MirrorStatus:
    """Filenames present in only one of the two sounds directories."""

    primary_only: list[str] = field(default_factory=list)
    shared_only: list[str] = field(default_factory=list)

    @property
    def in_sync(self) -> bool:
        return not self.primary_only and not self.shared_only


class SoundAssetStore:
    """Stores custom sounds in the primary directory and mirrors them.

    The primary directory is authoritative. Every write and delete is
    repeated, best effort, against the shared-container directory that the
    notification service extension reads from. The two steps are not
    transactional and the mirror is never repaired automatically.
    """

    def __init__(self, primary_dir: Path, shared_dir: Path | None = None) -> None:
        self._primary_dir = primary_dir
        self._shared_dir = shared_dir

    @property
    def primary_dir(self) -> Path:
        """Primary sounds directory, created on first access."""
        self._ensure_directory(self._primary_dir)
        return self._primary_dir

    @property
    def shared_dir(self) -> Path | None:
        """Shared sounds directory, created on first access.

        None when no shared container is configured.
        """
        if self._shared_dir is not None:
            self._ensure_directory(self._shared_dir)
        return self._shared_dir

    def _ensure_directory(self, directory: Path) -> DirectoryUnavailable | None:
        """Create ``directory`` if missing. Failures are logged and returned."""
        if directory.is_dir():
            return None
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create sounds directory {directory}: {e}")
            return DirectoryUnavailable(directory, str(e))
        logger.debug(f"Created sounds directory {directory}")
        return None

    def save(self, source: Path) -> SaveResult:
        """Copy a sound file into the primary directory, then mirror it.

        Existing files with the same name are overwritten in both places.
        If the primary copy fails the mirror is not attempted.
        """
        unavailable = self._ensure_directory(self._primary_dir)
        if unavailable is not None:
            return SaveResult(error=unavailable)

        destination = self._primary_dir / source.name
        try:
            shutil.copyfile(source, destination)
        except OSError as e:
            logger.warning(f"Could not import sound {source.name}: {e}")
            return SaveResult(error=CopyFailed(destination, str(e)))

        logger.info(f"Imported sound {source.name}")
        return SaveResult(path=destination, mirror_error=self._mirror_save(source))

    def _mirror_save(self, source: Path) -> SoundStoreError | None:
        shared_dir = self._shared_dir
        if shared_dir is None:
            return None
        unavailable = self._ensure_directory(shared_dir)
        if unavailable is not None:
            return unavailable

        destination = shared_dir / source.name
        try:
            shutil.copyfile(source, destination)
        except OSError as e:
            logger.warning(f"Could not mirror sound {source.name} to {shared_dir}: {e}")
            return CopyFailed(destination, str(e))
        return None

    def delete(self, location: Path) -> DeleteResult:
        """Remove a custom sound from the primary directory and its mirror.

        Only the filename of ``location`` is used, so defaults or files
        outside the primary directory are never touched. A mirror that is
        already gone counts as removed.
        """
        target = self.primary_dir / location.name
        error = None
        try:
            target.unlink()
            logger.info(f"Deleted sound {location.name}")
        except OSError as e:
            logger.warning(f"Could not delete sound {location.name}: {e}")
            error = RemoveFailed(target, str(e))

        return DeleteResult(error=error, mirror_error=self._mirror_delete(location.name))

    def _mirror_delete(self, name: str) -> SoundStoreError | None:
        shared_dir = self._shared_dir
        if shared_dir is None:
            return None
        unavailable = self._ensure_directory(shared_dir)
        if unavailable is not None:
            return unavailable

        try:
            (shared_dir / name).unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove mirrored sound {name} from {shared_dir}: {e}")
            return RemoveFailed(shared_dir / name, str(e))
        return None

    def list_files(self, directory: Path, suffix: str) -> list[Path]:
        """Return every file in ``directory`` whose name ends with ``suffix``.

        Entries keep the directory's enumeration order. An unreadable or
        missing directory yields an empty list.
        """
        files, error = self.scan(directory, suffix)
        if error is not None:
            logger.debug(f"Treating {directory} as empty: {error}")
        return files

    def scan(
        self, directory: Path, suffix: str
    ) -> tuple[list[Path], EnumerationFailed | None]:
        """Like ``list_files`` but also returns the enumeration error, if any."""
        try:
            entries = list(directory.iterdir())
        except OSError as e:
            return [], EnumerationFailed(directory, str(e))
        return [entry for entry in entries if entry.name.endswith(suffix)], None

    def mirror_status(self, suffix: str) -> MirrorStatus:
        """Compare the primary and shared directories by filename.

        Reporting only; nothing is copied or removed.
        """
        primary = {path.name for path in self.list_files(self.primary_dir, suffix)}
        shared_dir = self.shared_dir
        if shared_dir is None:
            return MirrorStatus(primary_only=sorted(primary))

        shared = {path.name for path in self.list_files(shared_dir, suffix)}
        return MirrorStatus(
            primary_only=sorted(primary - shared),
            shared_only=sorted(shared - primary),
        )
