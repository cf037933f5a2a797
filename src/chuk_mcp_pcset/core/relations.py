"""
Relation detection - single-operator relations between two sets.

Both tests compare elements by position and do no reordering, so
callers should pass sets that are already ordered compatibly (both in
normal order, for instance).

Sign convention: transposition_number(S, T) is the n for which
transpose(S, n) == T, i.e. (T[i] - S[i]) mod 12. Swapping the
arguments gives (12 - n) mod 12.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_pcset.constants import MODULUS


def _common_value(values: list[int]) -> int | None:
    if not values or any(v != values[0] for v in values):
        return None
    return values[0]


def transposition_number(source: Sequence[int], target: Sequence[int]) -> int | None:
    """
    Return n when target is source transposed by n, else None.

    None also covers a length mismatch and empty input.

        transposition_number([0, 4, 7], [2, 6, 9]) -> 2
    """
    if len(source) != len(target):
        return None
    return _common_value([(b - a) % MODULUS for a, b in zip(source, target)])


def index_number(source: Sequence[int], target: Sequence[int]) -> int | None:
    """
    Return n when target is TnI of source, else None.

    The index number is the constant sum source[i] + target[i] mod 12.

        index_number([0, 4, 7], [5, 1, 10]) -> 5
    """
    if len(source) != len(target):
        return None
    return _common_value([(a + b) % MODULUS for a, b in zip(source, target)])
