"""Notification sound library: bundled and custom alert sounds."""

from .coordinator import CoordinatorState, SoundListCoordinator
from .processors.catalog import SoundCatalog
from .services.storage import SoundAssetStore

__all__ = [
    "CoordinatorState",
    "SoundAssetStore",
    "SoundCatalog",
    "SoundListCoordinator",
]
