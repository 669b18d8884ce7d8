"""Catalog building logic."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..config import SOUND_SUFFIX
from ..models.catalog import ADD_ENTRY, AssetItem, CatalogSnapshot
from ..models.sound import SoundAsset
from ..utils.identifiers import sound_sort_key

if TYPE_CHECKING:
    from ..services.storage import SoundAssetStore

logger = logging.getLogger(__name__)


class SoundCatalog:
    """Builds sorted snapshots of the default and custom sounds.

    Custom sounds come from the store's primary directory only; the shared
    mirror never decides what is listed.
    """

    def __init__(
        self,
        store: SoundAssetStore,
        bundled_dir: Path,
        suffix: str = SOUND_SUFFIX,
    ) -> None:
        self._store = store
        self._bundled_dir = bundled_dir
        self._suffix = suffix
        self._reported_missing_bundle = False

    def build(self) -> CatalogSnapshot:
        """Read the current directory contents into a new snapshot."""
        bundled, error = self._store.scan(self._bundled_dir, self._suffix)
        if error is not None and not self._reported_missing_bundle:
            # Reported once per catalog
            logger.warning(f"No bundled default sounds available: {error}")
            self._reported_missing_bundle = True
        default_sounds = self._build_items(bundled, is_default=True)
        custom_sounds = self._build_items(
            self._store.list_files(self._store.primary_dir, self._suffix),
            is_default=False,
        )

        logger.debug(
            f"Built sound catalog: {len(custom_sounds)} custom, "
            f"{len(default_sounds)} default"
        )
        return CatalogSnapshot(
            custom_sounds=(*custom_sounds, ADD_ENTRY),
            default_sounds=tuple(default_sounds),
        )

    def _build_items(self, paths: list[Path], is_default: bool) -> list[AssetItem]:
        # sorted() is stable, so equal keys keep enumeration order
        ordered = sorted(paths, key=lambda path: sound_sort_key(path.name))
        return [AssetItem(SoundAsset(path, is_default=is_default)) for path in ordered]
