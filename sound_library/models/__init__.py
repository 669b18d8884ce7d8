"""Data models for sounds and the sound catalog."""

from .sound import AudioHandle, SoundAsset, SoundMetadata
from .catalog import (
    ADD_ENTRY,
    CUSTOM_SOUNDS,
    DEFAULT_SOUNDS,
    AddEntry,
    AssetItem,
    CatalogSnapshot,
    SoundListItem,
)

__all__ = [
    "AudioHandle",
    "SoundAsset",
    "SoundMetadata",
    "ADD_ENTRY",
    "CUSTOM_SOUNDS",
    "DEFAULT_SOUNDS",
    "AddEntry",
    "AssetItem",
    "CatalogSnapshot",
    "SoundListItem",
]
