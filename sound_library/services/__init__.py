"""Service modules for sound file storage."""

from .storage import (
    CopyFailed,
    DeleteResult,
    DirectoryUnavailable,
    EnumerationFailed,
    MirrorStatus,
    RemoveFailed,
    SaveResult,
    SoundAssetStore,
    SoundStoreError,
)

__all__ = [
    "CopyFailed",
    "DeleteResult",
    "DirectoryUnavailable",
    "EnumerationFailed",
    "MirrorStatus",
    "RemoveFailed",
    "SaveResult",
    "SoundAssetStore",
    "SoundStoreError",
]
