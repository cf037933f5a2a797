"""
MCP tool implementations.

Tools are organized by domain:
- forms - Normal order, prime form, transformations
- features - Interval vectors, chroma, full analysis
- relations - Transposition and index numbers
- catalog - Named set classes
"""

from chuk_mcp_pcset.tools.catalog import register_catalog_tools
from chuk_mcp_pcset.tools.features import register_feature_tools
from chuk_mcp_pcset.tools.forms import register_form_tools
from chuk_mcp_pcset.tools.relations import register_relation_tools

__all__ = [
    "register_catalog_tools",
    "register_feature_tools",
    "register_form_tools",
    "register_relation_tools",
]
