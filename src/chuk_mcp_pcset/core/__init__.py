"""
Core pitch-class set engine.

Pure functions over integer sequences, no I/O and no shared state:
- operations: invert, transpose, tni, ixy (and the i/t aliases)
- ordering: intervals, the ranking key for every canonical form
- forms: sort, rotate, zero, normal, reduced, prime, complement, reverse
- features: chroma, icvec, ivec
- relations: transposition_number, index_number
- PitchClassSet: immutable value type exposing all of the above
"""

from chuk_mcp_pcset.core.features import chroma, icvec, interval_class, ivec
from chuk_mcp_pcset.core.forms import (
    complement,
    normal,
    prime,
    reduced,
    reverse,
    rotate,
    shift,
    sort,
    unique,
    zero,
)
from chuk_mcp_pcset.core.operations import i, invert, ixy, t, tni, transpose
from chuk_mcp_pcset.core.ordering import intervals
from chuk_mcp_pcset.core.pcset import PitchClassSet
from chuk_mcp_pcset.core.pitch import (
    PitchClass,
    parse_pitch_class,
    parse_pitch_classes,
    spell_pitch_classes,
)
from chuk_mcp_pcset.core.relations import index_number, transposition_number

__all__ = [
    # Pitch
    "PitchClass",
    "parse_pitch_class",
    "parse_pitch_classes",
    "spell_pitch_classes",
    # Group operations
    "invert",
    "transpose",
    "i",
    "t",
    "tni",
    "ixy",
    # Ordering
    "intervals",
    # Forms
    "sort",
    "rotate",
    "shift",
    "reverse",
    "complement",
    "unique",
    "zero",
    "normal",
    "reduced",
    "prime",
    # Features
    "chroma",
    "icvec",
    "ivec",
    "interval_class",
    # Relations
    "transposition_number",
    "index_number",
    # Value type
    "PitchClassSet",
]
