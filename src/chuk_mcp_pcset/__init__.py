"""
CHUK Pitch-Class Set - canonical forms and invariants for pitch-class sets.

The core engine reduces pitch-class sequences to normal order and prime
form, extracts interval vectors and chroma masks, and detects
transposition/inversion relations. An MCP server exposes it as tools.
"""

from chuk_mcp_pcset.analysis import analyze, relate
from chuk_mcp_pcset.catalog import SetClassCatalog
from chuk_mcp_pcset.core import (
    PitchClass,
    PitchClassSet,
    chroma,
    complement,
    i,
    icvec,
    index_number,
    intervals,
    invert,
    ivec,
    ixy,
    normal,
    parse_pitch_classes,
    prime,
    reduced,
    reverse,
    rotate,
    shift,
    sort,
    t,
    tni,
    transpose,
    transposition_number,
    zero,
)
from chuk_mcp_pcset.models import SetAnalysis, SetClass, SetRelation

__version__ = "0.1.0"

__all__ = [
    "PitchClass",
    "PitchClassSet",
    "SetAnalysis",
    "SetClass",
    "SetClassCatalog",
    "SetRelation",
    "analyze",
    "chroma",
    "complement",
    "i",
    "icvec",
    "index_number",
    "intervals",
    "invert",
    "ivec",
    "ixy",
    "normal",
    "parse_pitch_classes",
    "prime",
    "reduced",
    "relate",
    "reverse",
    "rotate",
    "shift",
    "sort",
    "t",
    "tni",
    "transpose",
    "transposition_number",
    "zero",
]
