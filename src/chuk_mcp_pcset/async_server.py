#!/usr/bin/env python3
"""
Async Pitch-Class Set MCP Server using chuk-mcp-server

This server provides MCP tools for post-tonal set analysis: canonical
forms, interval vectors and transposition/inversion relations over
the twelve pitch classes.

The server provides tools for:
- Normal order, reduced form and prime form
- Transposition, inversion and other set transformations
- Interval-class vectors, sum vectors and chroma masks
- Relation tests between two sets
- Naming set classes from a YAML catalogue
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_pcset.catalog import SetClassCatalog
from chuk_mcp_pcset.tools import (
    register_catalog_tools,
    register_feature_tools,
    register_form_tools,
    register_relation_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-pcset")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
SET_CLASSES_DIR = BASE_PATH / "set_classes"
CATALOG_LIBRARY_PATH = Path(__file__).parent / "catalog" / "library"

catalog = SetClassCatalog(
    library_path=CATALOG_LIBRARY_PATH,
    project_path=SET_CLASSES_DIR,
)

# Register all tools
form_tools = register_form_tools(mcp)
feature_tools = register_feature_tools(mcp, catalog)
relation_tools = register_relation_tools(mcp)
catalog_tools = register_catalog_tools(mcp, catalog)

# Export tool functions for direct access
pcset_normal_form = form_tools["pcset_normal_form"]
pcset_prime_form = form_tools["pcset_prime_form"]
pcset_transform = form_tools["pcset_transform"]

pcset_interval_vectors = feature_tools["pcset_interval_vectors"]
pcset_chroma = feature_tools["pcset_chroma"]
pcset_analyze = feature_tools["pcset_analyze"]

pcset_relate = relation_tools["pcset_relate"]

pcset_list_set_classes = catalog_tools["pcset_list_set_classes"]
pcset_identify = catalog_tools["pcset_identify"]

logger.info("CHUK Pitch-Class Set MCP Server initialized")
logger.info(f"  Catalogue library: {CATALOG_LIBRARY_PATH}")
logger.info(f"  Project set classes: {SET_CLASSES_DIR}")
