"""
Relation tools - MCP tools comparing two pitch-class sets.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pcset.analysis import relate
from chuk_mcp_pcset.constants import SuccessMessages
from chuk_mcp_pcset.core import parse_pitch_classes

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_relation_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register relation tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_relate(
        source: list[int | str] | str,
        target: list[int | str] | str,
        use_normal_form: bool = False,
    ) -> str:
        """
        Check whether target is a transposition or inversion of source.

        The transposition number n satisfies Tn(source) == target, i.e.
        n = target[i] - source[i] (mod 12). The index number n satisfies
        TnI(source) == target, i.e. n = source[i] + target[i] (mod 12).
        Elements are paired by position unless use_normal_form is set, in
        which case the sets are compared as sets and the smallest n is given.

        Args:
            source: Source set
            target: Target set
            use_normal_form: Put both sets in normal order before comparing

        Returns:
            JSON string with transposition/index numbers (null when unrelated)

        Example:
            pcset_relate(source="C E G", target="D F# A")
        """
        try:
            relation = relate(
                parse_pitch_classes(source),
                parse_pitch_classes(target),
                use_normal_form=use_normal_form,
            )

            messages = []
            if relation.transposition_number is not None:
                messages.append(
                    SuccessMessages.RELATED_BY_TRANSPOSITION.format(
                        n=relation.transposition_number
                    )
                )
            if relation.index_number is not None:
                messages.append(
                    SuccessMessages.RELATED_BY_INVERSION.format(n=relation.index_number)
                )
            if not messages:
                messages.append(SuccessMessages.NOT_RELATED)

            return json.dumps(
                {
                    "status": "success",
                    "relation": relation.model_dump(),
                    "message": " ".join(messages),
                }
            )
        except Exception as e:
            logger.exception("Failed to relate sets")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_relate"] = pcset_relate

    return tools
