"""
Feature extraction - order-independent descriptors of a set.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_pcset.constants import AGGREGATE, INTERVAL_CLASS_COUNT, MODULUS
from chuk_mcp_pcset.core.forms import unique


def interval_class(a: int, b: int) -> int:
    """Shortest distance between two pitch classes (0-6)."""
    d = (b - a) % MODULUS
    return MODULUS - d if d > INTERVAL_CLASS_COUNT else d


def chroma(pcs: Sequence[int]) -> int:
    """
    12-bit presence mask; bit i is set when pitch class i occurs.

        chroma([0, 2, 4]) -> 21  (0b000000010101)
    """
    present = {x % MODULUS for x in pcs}
    mask = 0
    for pc in reversed(AGGREGATE):
        mask = (mask << 1) | (pc in present)
    return mask


def icvec(pcs: Sequence[int]) -> list[int]:
    """
    Interval-class vector: counts of unordered pairs by interval class 1-6.

    Pairs are taken over the deduplicated set, each once, in
    (earlier, later) order. Entries sum to C(m, 2) for m distinct
    pitch classes.

        icvec([0, 2, 4, 5, 7, 9, 11]) -> [2, 5, 4, 3, 6, 1]
    """
    members = unique(pcs)
    vector = [0] * INTERVAL_CLASS_COUNT
    for a_index, a in enumerate(members):
        for b in members[a_index + 1 :]:
            ic = interval_class(a, b)
            if ic:
                vector[ic - 1] += 1
    return vector


def ivec(pcs: Sequence[int]) -> list[int]:
    """
    Sum vector: counts of (x + y) mod 12 over every ordered pair in S x S.

    Self-pairs and repeats are included, so entries sum to len(S) ** 2.
    This is the additive convolution of the set with itself and is a
    different descriptor from icvec.
    """
    vector = [0] * MODULUS
    for x in pcs:
        for y in pcs:
            vector[(x + y) % MODULUS] += 1
    return vector
