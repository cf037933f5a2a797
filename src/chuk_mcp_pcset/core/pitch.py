"""
Pitch primitives - PitchClass and input parsing.

PitchClass names the 12 chromatic pitch classes (octave-independent).
The parse helpers turn caller input (ints, note names, MIDI numbers,
compact digit strings) into plain integer residues for the set engine.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from enum import IntEnum

from chuk_mcp_pcset.constants import MODULUS, ErrorMessages

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

# Compact notation digits: t = 10, e = 11
_COMPACT_DIGITS: dict[str, int] = {str(d): d for d in range(10)} | {"t": 10, "e": 11}

_SEPARATORS = re.compile(r"[\s,]+")


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % MODULUS)

    def invert(self) -> PitchClass:
        """Reflect about C: x -> (12 - x) mod 12."""
        return PitchClass((MODULUS - self.value) % MODULUS)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % MODULUS)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        name = name.strip()

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(ErrorMessages.UNKNOWN_PITCH_CLASS.format(value=name))


def parse_pitch_class(value: int | str) -> int:
    """
    Convert a single caller-supplied value to a residue in [0, 12).

    Accepts ints (any range, floored modulo), note names ('C#', 'Db', 'Cs'),
    and decimal strings ('10', '-1').
    """
    if isinstance(value, bool):
        raise ValueError(ErrorMessages.UNKNOWN_PITCH_CLASS.format(value=value))
    if isinstance(value, int):
        return int(value) % MODULUS

    text = str(value).strip()
    if re.fullmatch(r"[+-]?\d+", text):
        return int(text) % MODULUS
    return PitchClass.parse(text).value


def parse_pitch_classes(values: str | Iterable[int | str]) -> list[int]:
    """
    Convert caller input to a list of residues, preserving order and repeats.

    Strings are split on whitespace and commas. A single token made only
    of digits and t/e (e.g. '047' or '0te') is read one character per
    pitch class.

    Examples:
        parse_pitch_classes("C E G") -> [0, 4, 7]
        parse_pitch_classes("0,4,7") -> [0, 4, 7]
        parse_pitch_classes("047") -> [0, 4, 7]
        parse_pitch_classes([60, "Eb", 7]) -> [0, 3, 7]
    """
    if isinstance(values, str):
        tokens = [t for t in _SEPARATORS.split(values.strip()) if t]
        if len(tokens) == 1 and re.fullmatch(r"[0-9teTE]{2,}", tokens[0]):
            return [_COMPACT_DIGITS[ch] for ch in tokens[0].lower()]
        return [parse_pitch_class(t) for t in tokens]
    return [parse_pitch_class(v) for v in values]


def spell_pitch_classes(pcs: Sequence[int], prefer_flats: bool = False) -> list[str]:
    """Spell residues as note names."""
    return [PitchClass(pc % MODULUS).spell(prefer_flats) for pc in pcs]
