"""
Feature tools - MCP tools for set descriptors and full analysis.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pcset.analysis import analyze
from chuk_mcp_pcset.catalog import SetClassCatalog
from chuk_mcp_pcset.core import chroma, icvec, ivec, parse_pitch_classes

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_feature_tools(
    mcp: ChukMCPServer,
    catalog: SetClassCatalog | None = None,
) -> dict[str, Any]:
    """
    Register feature extraction tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: Optional set-class catalogue used to name analyzed sets

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_interval_vectors(pitch_classes: list[int | str] | str) -> str:
        """
        Compute the interval-class vector and sum vector of a set.

        The interval-class vector counts unordered pairs by interval class
        1-6. The interval vector counts (x + y) mod 12 over all ordered
        pairs, self-pairs included.

        Args:
            pitch_classes: Integers, note names, or a string like "C D E F G A B"

        Returns:
            JSON string with both vectors

        Example:
            pcset_interval_vectors(pitch_classes=[0, 2, 4, 5, 7, 9, 11])
        """
        try:
            pcs = parse_pitch_classes(pitch_classes)
            return json.dumps(
                {
                    "status": "success",
                    "pitch_classes": pcs,
                    "interval_class_vector": icvec(pcs),
                    "interval_vector": ivec(pcs),
                }
            )
        except Exception as e:
            logger.exception("Failed to compute interval vectors")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_interval_vectors"] = pcset_interval_vectors

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_chroma(pitch_classes: list[int | str] | str) -> str:
        """
        Compute the 12-bit chroma mask of a set.

        Bit i is set when pitch class i is present.

        Args:
            pitch_classes: Integers, note names, or a string

        Returns:
            JSON string with the mask as an integer and a binary string

        Example:
            pcset_chroma(pitch_classes=[0, 2, 4])
        """
        try:
            pcs = parse_pitch_classes(pitch_classes)
            mask = chroma(pcs)
            return json.dumps(
                {
                    "status": "success",
                    "pitch_classes": pcs,
                    "chroma": mask,
                    "binary": format(mask, "012b"),
                }
            )
        except Exception as e:
            logger.exception("Failed to compute chroma")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_chroma"] = pcset_chroma

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_analyze(pitch_classes: list[int | str] | str) -> str:
        """
        Full analysis of a pitch-class set.

        Returns normal, reduced and prime forms, both vectors, chroma,
        complement, symmetry information and any catalogue names.

        Args:
            pitch_classes: Integers, note names, or a string like "C E G Bb"

        Returns:
            JSON string with the analysis

        Example:
            pcset_analyze(pitch_classes="C E G Bb")
        """
        try:
            pcs = parse_pitch_classes(pitch_classes)
            result = analyze(pcs, catalog)
            return json.dumps({"status": "success", "analysis": result.model_dump()})
        except Exception as e:
            logger.exception("Failed to analyze set")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_analyze"] = pcset_analyze

    return tools
