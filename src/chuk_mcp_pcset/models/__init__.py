"""
Pydantic models for the pitch-class set system.

This module provides:
- SetAnalysis: Canonical forms and descriptors of one set
- SetRelation: Transposition/index relation between two sets
- SetClass: Named catalogue entry
"""

from chuk_mcp_pcset.models.analysis import SetAnalysis, SetClass, SetRelation

__all__ = [
    "SetAnalysis",
    "SetClass",
    "SetRelation",
]
