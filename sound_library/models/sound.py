"""Sound asset data models."""

from dataclasses import dataclass, field
from pathlib import Path

from ..utils.events import Signal
from ..utils.identifiers import display_name


@dataclass
class SoundMetadata:
    """Audio properties read from a sound file using TinyTag."""

    duration: float | None = None  # seconds
    samplerate: int | None = None  # Hz
    channels: int | None = None
    bitrate: float | None = None  # kBits/s
    filesize: int | None = None  # bytes

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {
            "duration": self.duration,
            "samplerate": self.samplerate,
            "channels": self.channels,
            "bitrate": self.bitrate,
            "filesize": self.filesize,
        }


@dataclass(frozen=True)
class AudioHandle:
    """Playable reference handed to the audio player."""

    path: Path

    @property
    def uri(self) -> str:
        return self.path.absolute().as_uri()


@dataclass(frozen=True)
class SoundAsset:
    """One playable notification sound.

    Default assets point at bundled, read-only resources. Custom assets
    point at a file in the primary sounds directory.

    ``copy_requested`` belongs to the asset's own list cell: it fires the
    display name whenever the user asks to copy it. It is excluded from
    equality so snapshots built from the same files compare equal.
    """

    path: Path
    is_default: bool = False
    copy_requested: Signal[str] = field(
        default_factory=Signal, compare=False, repr=False
    )

    @property
    def name(self) -> str:
        """Filename, also the mirroring key between directories."""
        return self.path.name

    @property
    def display_name(self) -> str:
        return display_name(self.path.name)

    @property
    def handle(self) -> AudioHandle:
        return AudioHandle(self.path)

    def request_copy(self) -> None:
        """Ask for this sound's name to be copied."""
        self.copy_requested.emit(self.display_name)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {
            "name": self.name,
            "display_name": self.display_name,
            "path": str(self.path),
            "is_default": self.is_default,
        }
