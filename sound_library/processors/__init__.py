"""Processor modules for building the sound catalog."""

from .catalog import SoundCatalog

__all__ = ["SoundCatalog"]
