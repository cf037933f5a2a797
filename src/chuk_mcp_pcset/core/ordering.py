"""
Ordering primitive - the interval profile used to rank candidate forms.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_pcset.constants import MODULUS


def intervals(pcs: Sequence[int]) -> list[int]:
    """
    Distances from the first element, read from the last element backwards.

    For S with head h, yields (x - h) mod 12 for each x in reversed(S).
    The first entry is the outer span and the last entry is always 0.
    Lists compare lexicographically, so the smallest profile is the one
    most tightly packed from the right; an empty input gives [], which
    sorts before everything.

        intervals([4, 6, 8, 0]) -> [8, 4, 2, 0]
    """
    if not pcs:
        return []
    head = pcs[0]
    return [(x - head) % MODULUS for x in reversed(pcs)]
