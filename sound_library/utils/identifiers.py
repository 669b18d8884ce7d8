"""Sound filename utilities."""

import re
import unicodedata
from pathlib import PurePath


def display_name(filename: str) -> str:
    """Name shown for a sound and used in push payloads.

    Strips the final suffix only: "alarm.caf" -> "alarm",
    "bell.v2.caf" -> "bell.v2".
    """
    return PurePath(filename).stem


def sound_sort_key(filename: str) -> list[str | int]:
    """Get a locale-aware, case-insensitive key for ordering filenames.

    Compares the way a file browser does: accents and case are folded and
    runs of digits compare by value, so "Bell2.caf" sorts before
    "bell10.caf". Splitting on a capturing group keeps text and number
    chunks at alternating positions, so keys always compare chunk-for-chunk.

    Example: "Éclair 10.caf" -> ["eclair ", 10, ".caf"]
    """
    decomposed = unicodedata.normalize("NFKD", filename)
    folded = "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()
    return [
        int(chunk) if chunk.isdigit() else chunk
        for chunk in re.split(r"(\d+)", folded)
    ]
