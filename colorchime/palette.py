# palette.py
"""
The fixed reference palette.

Eleven named colors, each paired with a base tone (C4..F5). The palette is built
once at import time and never mutated; iterate it to get the entries in their
declared order (that order decides ties in the classifier).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, NamedTuple, Optional, Tuple

from colorchime.errors import UnmappedColorError


class Color(NamedTuple):
    r: int
    g: int
    b: int

    @classmethod
    def checked(cls, r: int, g: int, b: int) -> "Color":
        """Build a Color, rejecting non-integers and components outside 0..255."""
        for c in (r, g, b):
            if isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255:
                raise ValueError(f"RGB components must be integers in 0..255, got {c!r}")
        return cls(r, g, b)


class PaletteEntry(NamedTuple):
    name: str
    color: Color
    frequency: Optional[int]  # Hz; None when the sound map has no entry


# ===== PALETTE DEFAULTS (EDIT HERE) =====
# Reference RGB values match the classic "known color" definitions.
BASIC_COLORS: Mapping[str, Color] = MappingProxyType({
    "Black": Color(0, 0, 0),
    "White": Color(255, 255, 255),
    "Red": Color(255, 0, 0),
    "Green": Color(0, 128, 0),
    "Blue": Color(0, 0, 255),
    "Yellow": Color(255, 255, 0),
    "Cyan": Color(0, 255, 255),
    "Magenta": Color(255, 0, 255),
    "Gray": Color(128, 128, 128),
    "DarkGray": Color(169, 169, 169),
    "LightGray": Color(211, 211, 211),
})

COLOR_SOUND_MAP: Mapping[str, int] = MappingProxyType({
    "Black": 261,      # C4
    "White": 293,      # D4
    "Red": 329,        # E4
    "Green": 349,      # F4
    "Blue": 391,       # G4
    "Yellow": 440,     # A4
    "Cyan": 493,       # B4
    "Magenta": 523,    # C5
    "Gray": 587,       # D5
    "DarkGray": 659,   # E5
    "LightGray": 698,  # F5
})


class Palette:
    """Immutable, ordered set of PaletteEntry."""

    __slots__ = ("_entries", "_by_name")

    def __init__(self, entries: Iterable[PaletteEntry]):
        self._entries: Tuple[PaletteEntry, ...] = tuple(entries)
        by_name: Dict[str, PaletteEntry] = {}
        for entry in self._entries:
            if entry.name in by_name:
                raise ValueError(f"Duplicate palette color: {entry.name!r}")
            by_name[entry.name] = entry
        self._by_name = MappingProxyType(by_name)

    @classmethod
    def from_maps(cls, colors: Mapping[str, Color], sounds: Mapping[str, int]) -> "Palette":
        return cls(PaletteEntry(name, color, sounds.get(name)) for name, color in colors.items())

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return f"Palette({[e.name for e in self._entries]})"

    def names(self) -> Tuple[str, ...]:
        return tuple(e.name for e in self._entries)

    def lookup(self, name: str) -> PaletteEntry:
        try:
            return self._by_name[name]
        except KeyError:
            raise UnmappedColorError(f"{name!r} is not a palette color") from None

    def frequency_for(self, name: str) -> int:
        entry = self.lookup(name)
        if entry.frequency is None:
            raise UnmappedColorError(f"No sound mapping exists for color {name}.")
        return entry.frequency


DEFAULT_PALETTE = Palette.from_maps(BASIC_COLORS, COLOR_SOUND_MAP)


def palette() -> Palette:
    return DEFAULT_PALETTE
