"""
Group operations - transposition and inversion.

The symmetries of 12-tone equal temperament, applied element-wise.
Every function returns a new list reduced into [0, 12); inputs are
never mutated and may contain raw, unreduced integers.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_pcset.constants import MODULUS


def invert(pcs: Sequence[int]) -> list[int]:
    """
    Invert about C: x -> (12 - x) mod 12.

    An involution on reduced input: invert(invert(S)) == S.

        invert([1, 2, 3]) -> [11, 10, 9]
    """
    return [(MODULUS - x) % MODULUS for x in pcs]


def transpose(pcs: Sequence[int], n: int) -> list[int]:
    """
    Transpose by n semitones: x -> (x + n) mod 12.

    Negative n wraps to a non-negative residue.

        transpose([1, 2, 3], -14) -> [11, 0, 1]
    """
    return [(x + n) % MODULUS for x in pcs]


def tni(pcs: Sequence[int], n: int) -> list[int]:
    """Invert, then transpose by n (TnI)."""
    return transpose(invert(pcs), n)


def ixy(pcs: Sequence[int], x: int, y: int) -> list[int]:
    """Invert about the axis that maps x onto y (and y onto x)."""
    return transpose(invert(pcs), x + y)


# Short aliases
i = invert
t = transpose
