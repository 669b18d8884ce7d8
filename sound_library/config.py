"""Configuration management for the notification sound library."""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


# Suffix of sound files usable as notification alerts
SOUND_SUFFIX = ".caf"

# App group shared with the notification service extension
DEFAULT_GROUP_ID = "group.bark"

SOUNDS_DIR_NAME = "Sounds"

PACKAGE_DIR = Path(__file__).parent
DEFAULT_BUNDLED_DIR = PACKAGE_DIR / "resources" / "sounds"


def default_library_dir() -> Path:
    """Per-user app Library directory."""
    if sys.platform == "darwin":
        return Path.home() / "Library"
    return Path.home() / ".local" / "share" / "bark"


def default_group_containers_dir() -> Path:
    """Root holding shared app-group containers."""
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Group Containers"
    return Path.home() / ".local" / "share" / "bark" / "group-containers"


@dataclass
class SoundPathConfig:
    """File path configuration."""

    library_dir: Path
    group_containers_dir: Path | None
    bundled_dir: Path = DEFAULT_BUNDLED_DIR
    group_id: str = DEFAULT_GROUP_ID

    @property
    def primary_dir(self) -> Path:
        """Private directory holding the authoritative custom sounds."""
        return self.library_dir / SOUNDS_DIR_NAME

    @property
    def shared_dir(self) -> Path | None:
        """Shared-container mirror, or None when no container is available."""
        if self.group_containers_dir is None:
            return None
        return self.group_containers_dir / self.group_id / SOUNDS_DIR_NAME

    def validate(self) -> None:
        """Validate path settings."""
        if not self.group_id.strip():
            raise ValueError("BARK_GROUP_ID must not be empty")


@dataclass
class Config:
    """Main configuration container."""

    paths: SoundPathConfig
    suffix: str = SOUND_SUFFIX

    @classmethod
    def from_environment(cls, env_path: Path | None = None) -> "Config":
        """Load configuration from environment variables."""
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        library_dir = os.getenv("BARK_LIBRARY_DIR")

        # An empty value disables the shared mirror entirely
        containers_dir = os.getenv("BARK_GROUP_CONTAINERS_DIR")
        if containers_dir is None:
            group_containers_dir = default_group_containers_dir()
        elif containers_dir.strip():
            group_containers_dir = Path(containers_dir).expanduser()
        else:
            group_containers_dir = None

        bundled_dir = os.getenv("BARK_BUNDLED_SOUNDS_DIR")

        return cls(
            paths=SoundPathConfig(
                library_dir=(
                    Path(library_dir).expanduser() if library_dir else default_library_dir()
                ),
                group_containers_dir=group_containers_dir,
                bundled_dir=(
                    Path(bundled_dir).expanduser() if bundled_dir else DEFAULT_BUNDLED_DIR
                ),
                group_id=os.getenv("BARK_GROUP_ID", DEFAULT_GROUP_ID),
            ),
            suffix=os.getenv("BARK_SOUND_SUFFIX", SOUND_SUFFIX),
        )

    def validate(self) -> None:
        """Validate the configuration."""
        self.paths.validate()
        self._validate_suffix()
        self._validate_bundled_dir()

    def _validate_suffix(self) -> None:
        logger = logging.getLogger(__name__)

        if not self.suffix.startswith(".") or len(self.suffix) < 2:
            raise ValueError(
                f"BARK_SOUND_SUFFIX must look like '.caf', got '{self.suffix}'"
            )

        # Notification sounds must be Core Audio files to play as alerts
        if self.suffix.lower() != SOUND_SUFFIX:
            logger.warning(
                f"Unusual sound suffix '{self.suffix}'. "
                f"Notification alerts expect '{SOUND_SUFFIX}' files"
            )

    def _validate_bundled_dir(self) -> None:
        logger = logging.getLogger(__name__)

        if not self.paths.bundled_dir.is_dir():
            logger.warning(
                f"Bundled sounds directory not found: {self.paths.bundled_dir}. "
                "The default sounds section will be empty; "
                "set BARK_BUNDLED_SOUNDS_DIR to the app's sound resources"
            )


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
