"""Catalog data models."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union, assert_never

from .sound import SoundAsset

CUSTOM_SOUNDS = "customSounds"
DEFAULT_SOUNDS = "defaultSounds"


@dataclass(frozen=True)
class AssetItem:
    """List row wrapping a playable sound."""

    asset: SoundAsset


@dataclass(frozen=True)
class AddEntry:
    """List row for the "import a new sound" action."""


ADD_ENTRY = AddEntry()

SoundListItem = Union[AssetItem, AddEntry]


def item_to_dict(item: SoundListItem) -> dict:
    """Convert a list item to a JSON-serializable dictionary."""
    if isinstance(item, AssetItem):
        return {"type": "asset", **item.asset.to_dict()}
    elif isinstance(item, AddEntry):
        return {"type": "addEntry"}
    else:
        assert_never(item)


@dataclass(frozen=True)
class CatalogSnapshot:
    """Sorted view of every available sound at one point in time.

    ``custom_sounds`` always ends with ``ADD_ENTRY``; ``default_sounds``
    only ever holds asset items.
    """

    custom_sounds: tuple[SoundListItem, ...] = (ADD_ENTRY,)
    default_sounds: tuple[AssetItem, ...] = ()

    def sections(self) -> list[tuple[str, tuple[SoundListItem, ...]]]:
        """Section keys paired with their items, in display order."""
        return [
            (CUSTOM_SOUNDS, self.custom_sounds),
            (DEFAULT_SOUNDS, self.default_sounds),
        ]

    def section(self, key: str) -> tuple[SoundListItem, ...]:
        for section_key, items in self.sections():
            if section_key == key:
                return items
        raise KeyError(key)

    def assets(self) -> Iterator[SoundAsset]:
        """Every wrapped asset, custom sounds first."""
        for _, items in self.sections():
            for item in items:
                if isinstance(item, AssetItem):
                    yield item.asset
                elif isinstance(item, AddEntry):
                    continue
                else:
                    assert_never(item)

    def find(self, name: str) -> SoundAsset | None:
        """Look up an asset by filename or display name (custom first)."""
        for asset in self.assets():
            if name in (asset.name, asset.display_name):
                return asset
        return None

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {
            key: [item_to_dict(item) for item in items]
            for key, items in self.sections()
        }
