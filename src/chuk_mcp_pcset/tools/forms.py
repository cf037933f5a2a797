"""
Form tools - MCP tools for canonical forms and transformations.

Tools for normal order, prime form and the group operations.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pcset.constants import ErrorMessages, TransformOperation
from chuk_mcp_pcset.core import (
    complement,
    intervals,
    invert,
    ixy,
    normal,
    parse_pitch_classes,
    prime,
    reduced,
    reverse,
    rotate,
    sort,
    spell_pitch_classes,
    tni,
    transpose,
    zero,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _apply_operation(
    operation: TransformOperation,
    pcs: list[int],
    n: int | None,
    x: int | None,
    y: int | None,
) -> list[int]:
    """Dispatch a transform operation, checking its parameters."""

    def require(name: str, value: int | None) -> int:
        if value is None:
            raise ValueError(
                ErrorMessages.MISSING_PARAMETER.format(operation=operation.value, parameter=name)
            )
        return value

    if operation == TransformOperation.T:
        return transpose(pcs, require("n", n))
    elif operation == TransformOperation.I:
        return invert(pcs)
    elif operation == TransformOperation.TNI:
        return tni(pcs, require("n", n))
    elif operation == TransformOperation.IXY:
        return ixy(pcs, require("x", x), require("y", y))
    elif operation == TransformOperation.COMPLEMENT:
        return complement(pcs)
    elif operation == TransformOperation.REVERSE:
        return reverse(pcs)
    elif operation == TransformOperation.ROTATE:
        return rotate(pcs, require("n", n))
    elif operation == TransformOperation.ZERO:
        return zero(pcs)
    elif operation == TransformOperation.SORT:
        return sort(pcs)
    raise ValueError(
        ErrorMessages.UNKNOWN_OPERATION.format(
            operation=operation.value,
            expected=", ".join(o.value for o in TransformOperation),
        )
    )


def register_form_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register canonical-form tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_normal_form(pitch_classes: list[int | str] | str) -> str:
        """
        Compute the normal order of a pitch-class set.

        Normal order is the most tightly packed rotation of the sorted,
        deduplicated set.

        Args:
            pitch_classes: Integers, note names, or a string like "C E G" / "047"

        Returns:
            JSON string with normal order, reduced form and spelling

        Example:
            pcset_normal_form(pitch_classes=[8, 0, 4, 6])
        """
        try:
            pcs = parse_pitch_classes(pitch_classes)
            normal_form = normal(pcs)
            return json.dumps(
                {
                    "status": "success",
                    "pitch_classes": pcs,
                    "normal_form": normal_form,
                    "reduced_form": reduced(pcs),
                    "intervals": intervals(normal_form),
                    "spelled": spell_pitch_classes(normal_form),
                }
            )
        except Exception as e:
            logger.exception("Failed to compute normal form")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_normal_form"] = pcset_normal_form

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_prime_form(pitch_classes: list[int | str] | str) -> str:
        """
        Compute the prime form (set-class representative) of a set.

        Sets related by transposition or inversion share a prime form.

        Args:
            pitch_classes: Integers, note names, or a string like "D E G# A"

        Returns:
            JSON string with the prime form

        Example:
            pcset_prime_form(pitch_classes=[2, 4, 8, 9])
        """
        try:
            pcs = parse_pitch_classes(pitch_classes)
            return json.dumps(
                {
                    "status": "success",
                    "pitch_classes": pcs,
                    "prime_form": prime(pcs),
                    "cardinality": len(set(pcs)),
                }
            )
        except Exception as e:
            logger.exception("Failed to compute prime form")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_prime_form"] = pcset_prime_form

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_transform(
        pitch_classes: list[int | str] | str,
        operation: str,
        n: int | None = None,
        x: int | None = None,
        y: int | None = None,
    ) -> str:
        """
        Apply a transformation to a pitch-class set.

        Args:
            pitch_classes: Integers, note names, or a string like "0 4 7"
            operation: One of 'T', 'I', 'TnI', 'IXY', 'complement',
                'reverse', 'rotate', 'zero', 'sort'
            n: Transposition amount (T, TnI) or rotation index (rotate)
            x: First pitch class of the axis (IXY)
            y: Second pitch class of the axis (IXY)

        Returns:
            JSON string with the transformed set

        Example:
            pcset_transform(pitch_classes="C E G", operation="TnI", n=7)
        """
        try:
            try:
                op = TransformOperation(operation)
            except ValueError:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNKNOWN_OPERATION.format(
                            operation=operation,
                            expected=", ".join(o.value for o in TransformOperation),
                        ),
                    }
                )

            pcs = parse_pitch_classes(pitch_classes)
            result = _apply_operation(op, pcs, n, x, y)
            return json.dumps(
                {
                    "status": "success",
                    "operation": op.value,
                    "pitch_classes": pcs,
                    "result": result,
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to transform set")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_transform"] = pcset_transform

    return tools
