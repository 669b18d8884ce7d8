"""Extractor modules for sound metadata."""

from .metadata import SoundMetadataExtractor

__all__ = ["SoundMetadataExtractor"]
