"""
Catalog tools - MCP tools for named set classes.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pcset.catalog import SetClassCatalog
from chuk_mcp_pcset.core import parse_pitch_classes, prime

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_catalog_tools(
    mcp: ChukMCPServer,
    catalog: SetClassCatalog,
) -> dict[str, Any]:
    """
    Register catalogue tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The set-class catalogue

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_list_set_classes(family: str | None = None) -> str:
        """
        List named set classes in the catalogue.

        Args:
            family: Optional family filter ('triads', 'sevenths', 'scales')

        Returns:
            JSON string with catalogue entries

        Example:
            pcset_list_set_classes(family="triads")
        """
        try:
            entries = catalog.list_set_classes(family)
            return json.dumps(
                {
                    "status": "success",
                    "families": catalog.families(),
                    "set_classes": [e.model_dump() for e in entries],
                }
            )
        except Exception as e:
            logger.exception("Failed to list set classes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_list_set_classes"] = pcset_list_set_classes

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_identify(pitch_classes: list[int | str] | str) -> str:
        """
        Name the set class of a pitch-class set.

        Args:
            pitch_classes: Integers, note names, or a string like "D F A"

        Returns:
            JSON string with the prime form and matching catalogue entries

        Example:
            pcset_identify(pitch_classes="D F A")
        """
        try:
            pcs = parse_pitch_classes(pitch_classes)
            matches = catalog.identify(pcs)
            return json.dumps(
                {
                    "status": "success",
                    "prime_form": prime(pcs),
                    "matches": [e.name for e in matches],
                }
            )
        except Exception as e:
            logger.exception("Failed to identify set class")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_identify"] = pcset_identify

    return tools
