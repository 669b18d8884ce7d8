#!/usr/bin/env python3
"""
Notification Sound Library

Lists the sounds available for push-notification alerts and imports or
deletes custom sounds, keeping the shared-container mirror used by the
notification service extension up to date.
"""

import argparse
import json
import logging
from pathlib import Path

from tqdm import tqdm

from .config import Config, configure_logging
from .coordinator import SoundListCoordinator
from .extractors.metadata import SoundMetadataExtractor
from .models.catalog import AssetItem, CatalogSnapshot, SoundListItem, item_to_dict
from .models.sound import SoundAsset
from .processors.catalog import SoundCatalog
from .services.storage import SoundAssetStore

logger = logging.getLogger(__name__)


class SoundLibrary:
    """Wires the store, catalog and coordinator for command line use."""

    def __init__(self, config: Config) -> None:
        self._config = config
        self._store = SoundAssetStore(config.paths.primary_dir, config.paths.shared_dir)
        self._catalog = SoundCatalog(self._store, config.paths.bundled_dir, config.suffix)
        self._metadata = SoundMetadataExtractor()
        self.coordinator = SoundListCoordinator(self._store, self._catalog)
        self.coordinator.start()

    @property
    def snapshot(self) -> CatalogSnapshot:
        return self.coordinator.snapshot

    def list_sounds(self, as_json: bool = False, durations: bool = False) -> None:
        """Print every section of the current catalog."""
        if as_json:
            sections = {}
            for key, items in self.snapshot.sections():
                sections[key] = [self._item_dict(item, durations) for item in items]
            print(json.dumps(sections, indent=2, ensure_ascii=False))
            return

        for key, items in self.snapshot.sections():
            print(f"{key}:")
            for item in items:
                entry = self._item_dict(item, durations)
                if entry["type"] == "addEntry":
                    print("  + add sound")
                    continue
                line = f"  {entry['display_name']}"
                duration = entry.get("duration")
                if duration is not None:
                    line += f" ({duration:.1f}s)"
                print(line)

    def _item_dict(self, item: SoundListItem, durations: bool) -> dict:
        entry = item_to_dict(item)
        if durations and entry["type"] == "asset":
            entry["duration"] = self._metadata.extract(Path(entry["path"])).duration
        return entry

    def import_sounds(self, files: list[Path]) -> int:
        """Import sound files, returning how many were imported."""
        imported = 0
        mirror_failures = 0

        for file_path in tqdm(files, desc="Importing", unit="file"):
            if not file_path.name.endswith(self._config.suffix):
                logger.warning(
                    f"Skipping {file_path.name} - not a {self._config.suffix} file"
                )
                continue
            result = self.coordinator.import_sound(file_path)
            if result.succeeded:
                imported += 1
                if result.mirror_error is not None:
                    mirror_failures += 1

        print(f"\nImported: {imported} of {len(files)} files")
        if mirror_failures:
            print(f"  Not mirrored to shared container: {mirror_failures} files")
        return imported

    def delete_sounds(self, names: list[str]) -> int:
        """Delete custom sounds by filename or display name."""
        deleted = 0
        for name in names:
            asset = self._find_custom(name)
            if asset is None:
                print(f"No custom sound named '{name}'")
                continue
            result = self.coordinator.delete_sound(AssetItem(asset))
            if result is not None and result.succeeded:
                deleted += 1
                print(f"Deleted {asset.name}")
            else:
                print(f"Could not delete {asset.name}")
        return deleted

    def _find_custom(self, name: str) -> SoundAsset | None:
        for asset in self.snapshot.assets():
            if not asset.is_default and name in (asset.name, asset.display_name):
                return asset
        return None

    def show_info(self, name: str) -> bool:
        """Print the location and audio properties of one sound."""
        asset = self.snapshot.find(name)
        if asset is None:
            print(f"No sound named '{name}'")
            return False

        metadata = self._metadata.extract(asset.path)
        print(f"Name: {asset.display_name}")
        print(f"  File: {asset.path}")
        print(f"  Kind: {'default' if asset.is_default else 'custom'}")
        for key, value in metadata.to_dict().items():
            if value is not None:
                print(f"  {key.capitalize()}: {value}")
        return True

    def show_mirror_status(self) -> bool:
        """Report files missing from either sounds directory."""
        shared_dir = self._config.paths.shared_dir
        if shared_dir is None:
            print("Shared container disabled; nothing is mirrored.")
            return True

        status = self._store.mirror_status(self._config.suffix)
        if status.in_sync:
            print(f"Shared container in sync: {shared_dir}")
            return True

        for name in status.primary_only:
            print(f"  missing from shared container: {name}")
        for name in status.shared_only:
            print(f"  only in shared container: {name}")
        return False


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Manage notification alert sounds"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Load settings from this .env file",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    list_parser = commands.add_parser("list", help="List available sounds")
    list_parser.add_argument("--json", action="store_true", help="Print JSON")
    list_parser.add_argument(
        "--durations", action="store_true", help="Read each sound's duration"
    )

    import_parser = commands.add_parser("import", help="Import custom sounds")
    import_parser.add_argument("files", nargs="+", type=Path)

    delete_parser = commands.add_parser("delete", help="Delete custom sounds")
    delete_parser.add_argument("names", nargs="+")

    info_parser = commands.add_parser("info", help="Show details of a sound")
    info_parser.add_argument("name")

    commands.add_parser("mirror", help="Check the shared-container mirror")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    configure_logging(verbose=args.verbose)

    try:
        config = Config.from_environment(args.env_file)
        config.validate()
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    library = SoundLibrary(config)

    if args.command == "list":
        library.list_sounds(as_json=args.json, durations=args.durations)
        return 0
    if args.command == "import":
        return 0 if library.import_sounds(args.files) == len(args.files) else 1
    if args.command == "delete":
        return 0 if library.delete_sounds(args.names) == len(args.names) else 1
    if args.command == "info":
        return 0 if library.show_info(args.name) else 1
    if args.command == "mirror":
        return 0 if library.show_mirror_status() else 1
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
