"""
Canonical forms - normal order, reduced form, prime form.

These reduce an arbitrary ordered pitch-class sequence to the
representative of its rotation, transposition and inversion class.
Ranking between candidates always uses the interval profile from
ordering.intervals, compared lexicographically; earlier candidates
win ties.

All functions return new lists and accept the empty sequence, for
which every canonical form is itself empty.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_pcset.constants import AGGREGATE, MODULUS
from chuk_mcp_pcset.core.operations import invert, transpose
from chuk_mcp_pcset.core.ordering import intervals


def sort(pcs: Sequence[int]) -> list[int]:
    """Ascending order by value (stable)."""
    return sorted(pcs)


def rotate(pcs: Sequence[int], n: int) -> list[int]:
    """
    Cyclic left rotation by n + 1 positions.

    The index is 1-based: rotate(S, 0) brings the second element to the
    front, rotate(S, len(S) - 1) is S itself.

        rotate([1, 2, 3], 1) -> [3, 1, 2]
    """
    if not pcs:
        return []
    k = (n + 1) % len(pcs)
    return list(pcs[k:]) + list(pcs[:k])


# Original name for rotate
shift = rotate


def reverse(pcs: Sequence[int]) -> list[int]:
    """Retrograde: the same elements in reverse order."""
    return list(reversed(pcs))


def complement(pcs: Sequence[int]) -> list[int]:
    """Pitch classes of the aggregate not present in pcs, ascending."""
    present = {x % MODULUS for x in pcs}
    return [pc for pc in AGGREGATE if pc not in present]


def zero(pcs: Sequence[int]) -> list[int]:
    """Transpose so the first element is 0."""
    if not pcs:
        return []
    return transpose(pcs, MODULUS - pcs[0])


def unique(pcs: Sequence[int]) -> list[int]:
    """Reduce mod 12 and drop repeats, keeping first occurrences in order."""
    return list(dict.fromkeys(x % MODULUS for x in pcs))


def normal(pcs: Sequence[int]) -> list[int]:
    """
    Normal order: the most tightly packed rotation of the sorted set.

    The input is reduced mod 12, sorted and deduplicated. Starting from
    that sorted sequence, each rotation is compared by its interval
    profile and the smallest wins; ties keep the earlier candidate.

        normal([8, 0, 4, 6]) -> [4, 6, 8, 0]
        normal([2, 1, 3, 7, 6]) -> [1, 2, 3, 6, 7]
    """
    candidate = sort(unique(pcs))
    best = candidate
    best_profile = intervals(best)
    for n in range(len(candidate) - 1):
        rotation = rotate(candidate, n)
        profile = intervals(rotation)
        if profile < best_profile:
            best, best_profile = rotation, profile
    return best


def reduced(pcs: Sequence[int]) -> list[int]:
    """Normal order transposed to start on 0."""
    return zero(normal(pcs))


def prime(pcs: Sequence[int]) -> list[int]:
    """
    Prime form: the set-class representative.

    Compares the reduced forms of the set and of its inversion and keeps
    the one with the smaller interval profile (the set itself on a tie).

        prime([2, 4, 8, 9]) -> [0, 1, 5, 7]
    """
    original = reduced(pcs)
    inverted = reduced(invert(pcs))
    if intervals(inverted) < intervals(original):
        return inverted
    return original
