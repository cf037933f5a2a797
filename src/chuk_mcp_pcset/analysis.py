"""
Set analysis - builds result models from the core engine.

This is the layer the tools talk to: it takes already-parsed pitch
classes, runs every relevant core operation and packages the answers
as pydantic models.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from chuk_mcp_pcset.constants import AGGREGATE, MODULUS
from chuk_mcp_pcset.core import (
    chroma,
    complement,
    icvec,
    index_number,
    ivec,
    normal,
    prime,
    reduced,
    tni,
    transpose,
    transposition_number,
    unique,
)
from chuk_mcp_pcset.models.analysis import SetAnalysis, SetRelation

if TYPE_CHECKING:
    from chuk_mcp_pcset.catalog import SetClassCatalog


def transpositional_symmetry(pcs: Sequence[int]) -> int:
    """Count the n in 0-11 for which Tn maps the set onto itself (T0 included)."""
    members = set(unique(pcs))
    return sum(1 for n in AGGREGATE if set(transpose(members, n)) == members)


def is_inversionally_symmetric(pcs: Sequence[int]) -> bool:
    """Whether some TnI maps the set onto itself."""
    members = set(unique(pcs))
    return any(set(tni(members, n)) == members for n in AGGREGATE)


def analyze(pcs: Sequence[int], catalog: SetClassCatalog | None = None) -> SetAnalysis:
    """
    Analyze one pitch-class set.

    Args:
        pcs: Pitch classes (raw ints are reduced mod 12)
        catalog: Optional catalogue used to name the set class

    Returns:
        SetAnalysis with canonical forms, vectors and symmetry counts
    """
    names = [entry.name for entry in catalog.identify(pcs)] if catalog else []
    return SetAnalysis(
        pitch_classes=[x % MODULUS for x in pcs],
        cardinality=len(unique(pcs)),
        normal_form=normal(pcs),
        reduced_form=reduced(pcs),
        prime_form=prime(pcs),
        interval_class_vector=icvec(pcs),
        interval_vector=ivec(pcs),
        chroma=chroma(pcs),
        complement=complement(pcs),
        transpositional_symmetry=transpositional_symmetry(pcs),
        is_inversionally_symmetric=is_inversionally_symmetric(pcs),
        names=names,
    )


def _first_mapping(
    source: Sequence[int],
    target: Sequence[int],
    operation: Callable[[Sequence[int], int], list[int]],
) -> int | None:
    """Smallest n in 0-11 with operation(source, n) equal to target as a set."""
    members, goal = set(unique(source)), set(unique(target))
    if not members or len(members) != len(goal):
        return None
    return next((n for n in AGGREGATE if set(operation(members, n)) == goal), None)


def relate(
    source: Sequence[int],
    target: Sequence[int],
    use_normal_form: bool = False,
) -> SetRelation:
    """
    Test whether target is a single transposition or inversion of source.

    Positional comparison pairs source[i] with target[i] exactly as given.
    In normal-form mode both sets are reported in normal order and compared
    as sets: the numbers are the smallest n with Tn(source) or TnI(source)
    equal to target. Symmetric sets map onto each other under several n.

    Args:
        source: Source pitch classes
        target: Target pitch classes
        use_normal_form: Compare as sets in normal order; otherwise
            elements are paired by position exactly as given

    Returns:
        SetRelation with the operator numbers (None when not related)
    """
    if use_normal_form:
        left, right = normal(source), normal(target)
        n_transposition = _first_mapping(source, target, transpose)
        n_index = _first_mapping(source, target, tni)
    else:
        left, right = [x % MODULUS for x in source], [x % MODULUS for x in target]
        n_transposition = transposition_number(left, right)
        n_index = index_number(left, right)

    return SetRelation(
        source=left,
        target=right,
        compared_in_normal_form=use_normal_form,
        transposition_number=n_transposition,
        index_number=n_index,
        same_set_class=prime(source) == prime(target),
    )
