"""Sound metadata extraction using TinyTag."""

import logging
from pathlib import Path

from tinytag import TinyTag

from ..models.sound import SoundMetadata

logger = logging.getLogger(__name__)


class SoundMetadataExtractor:
    """Extracts duration and audio properties from sound files."""

    def extract(self, file_path: Path) -> SoundMetadata:
        """Extract metadata from a sound file using TinyTag.

        Unreadable or unsupported files yield metadata with only the file
        size filled in (when the file exists at all).
        """
        try:
            tag = TinyTag.get(str(file_path))
            return SoundMetadata(
                duration=round(tag.duration, 3) if tag.duration else None,
                samplerate=tag.samplerate,
                channels=tag.channels,
                bitrate=tag.bitrate,
                filesize=tag.filesize,
            )
        except Exception as e:
            logger.warning(f"Could not read metadata from {file_path}: {e}")
            return SoundMetadata(filesize=self._filesize(file_path))

    def _filesize(self, file_path: Path) -> int | None:
        try:
            return file_path.stat().st_size
        except OSError:
            return None
