"""
PitchClassSet - immutable value type over the functional engine.

Every operation in the core modules is available as a method. Methods
that produce a sequence return a new PitchClassSet; descriptors return
plain ints and lists.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from chuk_mcp_pcset.core import features, forms, operations, ordering, relations
from chuk_mcp_pcset.core.pitch import parse_pitch_classes, spell_pitch_classes


class PitchClassSet(Sequence[int]):
    """
    An ordered pitch-class sequence (duplicates allowed).

    Order matters for equality and for the relation tests; the
    canonical forms quotient it out.

    Immutable and hashable.
    """

    __slots__ = ("_pcs",)
    _pcs: tuple[int, ...]

    def __init__(self, pcs: Iterable[int] = ()) -> None:
        """Create a set from integers, kept exactly as given."""
        object.__setattr__(self, "_pcs", tuple(int(x) for x in pcs))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("PitchClassSet is immutable")

    @classmethod
    def parse(cls, values: str | Iterable[int | str]) -> PitchClassSet:
        """Parse note names, integers or compact digits ('C E G', '0,4,7', '047')."""
        return cls(parse_pitch_classes(values))

    @classmethod
    def from_midi(cls, notes: Iterable[int]) -> PitchClassSet:
        """Pitch classes of MIDI note numbers."""
        return cls(parse_pitch_classes(list(notes)))

    # Sequence protocol

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> PitchClassSet: ...

    def __getitem__(self, index: int | slice) -> int | PitchClassSet:
        if isinstance(index, slice):
            return PitchClassSet(self._pcs[index])
        return self._pcs[index]

    def __len__(self) -> int:
        return len(self._pcs)

    def __iter__(self) -> Iterator[int]:
        return iter(self._pcs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PitchClassSet):
            return self._pcs == other._pcs
        if isinstance(other, (list, tuple)):
            return list(self._pcs) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._pcs)

    def __repr__(self) -> str:
        return f"PitchClassSet({list(self._pcs)})"

    def __str__(self) -> str:
        return "[" + ",".join(str(x) for x in self._pcs) + "]"

    def to_list(self) -> list[int]:
        """Plain list copy."""
        return list(self._pcs)

    def spell(self, prefer_flats: bool = False) -> list[str]:
        """Note names of the members."""
        return spell_pitch_classes(self._pcs, prefer_flats)

    # Group operations

    def invert(self) -> PitchClassSet:
        return PitchClassSet(operations.invert(self._pcs))

    def transpose(self, n: int) -> PitchClassSet:
        return PitchClassSet(operations.transpose(self._pcs, n))

    def i(self) -> PitchClassSet:
        return self.invert()

    def t(self, n: int) -> PitchClassSet:
        return self.transpose(n)

    def tni(self, n: int) -> PitchClassSet:
        return PitchClassSet(operations.tni(self._pcs, n))

    def ixy(self, x: int, y: int) -> PitchClassSet:
        return PitchClassSet(operations.ixy(self._pcs, x, y))

    # Canonical forms

    def intervals(self) -> list[int]:
        return ordering.intervals(self._pcs)

    def sort(self) -> PitchClassSet:
        return PitchClassSet(forms.sort(self._pcs))

    def rotate(self, n: int) -> PitchClassSet:
        return PitchClassSet(forms.rotate(self._pcs, n))

    def shift(self, n: int) -> PitchClassSet:
        return self.rotate(n)

    def reverse(self) -> PitchClassSet:
        return PitchClassSet(forms.reverse(self._pcs))

    def complement(self) -> PitchClassSet:
        return PitchClassSet(forms.complement(self._pcs))

    def zero(self) -> PitchClassSet:
        return PitchClassSet(forms.zero(self._pcs))

    def normal(self) -> PitchClassSet:
        return PitchClassSet(forms.normal(self._pcs))

    def reduced(self) -> PitchClassSet:
        return PitchClassSet(forms.reduced(self._pcs))

    def prime(self) -> PitchClassSet:
        return PitchClassSet(forms.prime(self._pcs))

    # Features

    def chroma(self) -> int:
        return features.chroma(self._pcs)

    def icvec(self) -> list[int]:
        return features.icvec(self._pcs)

    def ivec(self) -> list[int]:
        return features.ivec(self._pcs)

    @property
    def cardinality(self) -> int:
        """Number of distinct pitch classes."""
        return len(forms.unique(self._pcs))

    # Relations

    def transposition_number(self, other: Sequence[int]) -> int | None:
        """n such that self.transpose(n) == other, or None."""
        return relations.transposition_number(self._pcs, list(other))

    def index_number(self, other: Sequence[int]) -> int | None:
        """n such that self.tni(n) == other, or None."""
        return relations.index_number(self._pcs, list(other))

    def is_transposition_of(self, other: Sequence[int]) -> bool:
        """Same normal-order shape, related by some Tn."""
        n = relations.transposition_number(forms.normal(other), forms.normal(self._pcs))
        return n is not None

    def is_same_set_class(self, other: Sequence[int]) -> bool:
        """Equal prime forms (related by Tn or TnI)."""
        return forms.prime(self._pcs) == forms.prime(other)
