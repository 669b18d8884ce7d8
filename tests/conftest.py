"""Shared fixtures for sound library tests."""

import sys
from pathlib import Path

import pytest

# Add parent dir to path so sound_library is importable as a package
sys.path.insert(0, str(Path(__file__).parent.parent))

from sound_library.processors.catalog import SoundCatalog
from sound_library.services.storage import SoundAssetStore


def write_sound(directory: Path, name: str, data: bytes | None = None) -> Path:
    """Create a fake sound file and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_bytes(data if data is not None else f"caf:{name}".encode())
    return path


@pytest.fixture
def primary_dir(tmp_path):
    return tmp_path / "Library" / "Sounds"


@pytest.fixture
def shared_dir(tmp_path):
    return tmp_path / "Group Containers" / "group.bark" / "Sounds"


@pytest.fixture
def bundled_dir(tmp_path):
    """Bundled defaults: alarm.caf and bell.caf, plus a non-sound file."""
    directory = tmp_path / "bundle"
    write_sound(directory, "bell.caf")
    write_sound(directory, "alarm.caf")
    write_sound(directory, "Info.plist")
    return directory


@pytest.fixture
def imports_dir(tmp_path):
    """Directory holding files picked for import."""
    directory = tmp_path / "picked"
    directory.mkdir()
    return directory


@pytest.fixture
def store(primary_dir, shared_dir):
    return SoundAssetStore(primary_dir, shared_dir)


@pytest.fixture
def catalog(store, bundled_dir):
    return SoundCatalog(store, bundled_dir, ".caf")
