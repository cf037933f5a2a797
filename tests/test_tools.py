"""
Tests for MCP tools.

Tests the MCP tool implementations for forms, features, relations and
the set-class catalogue.
"""

import json

import pytest

from chuk_mcp_pcset.catalog import SetClassCatalog
from chuk_mcp_pcset.constants import TransformOperation
from chuk_mcp_pcset.tools import (
    register_catalog_tools,
    register_feature_tools,
    register_form_tools,
    register_relation_tools,
)
from chuk_mcp_pcset.tools.forms import _apply_operation


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


class TestFormTools:
    """Tests for form tools."""

    def test_registration(self):
        """All form tools are registered on the server."""
        mcp = MockMCPServer("test")
        tools = register_form_tools(mcp)
        assert set(tools) == {"pcset_normal_form", "pcset_prime_form", "pcset_transform"}
        assert set(mcp.tools) == set(tools)

    @pytest.mark.asyncio
    async def test_normal_form(self):
        """Normal form tool."""
        tools = register_form_tools(MockMCPServer("test"))
        data = json.loads(await tools["pcset_normal_form"](pitch_classes=[8, 0, 4, 6]))
        assert data["status"] == "success"
        assert data["normal_form"] == [4, 6, 8, 0]
        assert data["reduced_form"] == [0, 2, 4, 8]
        assert data["spelled"] == ["E", "F#", "G#", "C"]

    @pytest.mark.asyncio
    async def test_prime_form_from_names(self):
        """Prime form tool accepts note names."""
        tools = register_form_tools(MockMCPServer("test"))
        data = json.loads(await tools["pcset_prime_form"](pitch_classes="D E G# A"))
        assert data["status"] == "success"
        assert data["prime_form"] == [0, 1, 5, 7]
        assert data["cardinality"] == 4

    @pytest.mark.asyncio
    async def test_transform_operations(self):
        """Transform tool dispatches each operation."""
        tools = register_form_tools(MockMCPServer("test"))
        transform = tools["pcset_transform"]

        cases = [
            ({"operation": "T", "n": -14}, [11, 0, 1]),
            ({"operation": "I"}, [11, 10, 9]),
            ({"operation": "TnI", "n": 5}, [4, 3, 2]),
            ({"operation": "IXY", "x": 0, "y": 5}, [4, 3, 2]),
            ({"operation": "reverse"}, [3, 2, 1]),
            ({"operation": "rotate", "n": 1}, [3, 1, 2]),
            ({"operation": "zero"}, [0, 1, 2]),
            ({"operation": "sort"}, [1, 2, 3]),
        ]
        for kwargs, expected in cases:
            data = json.loads(await transform(pitch_classes=[1, 2, 3], **kwargs))
            assert data["status"] == "success", kwargs
            assert data["result"] == expected, kwargs

        data = json.loads(await transform(pitch_classes="0 1 2 3 4 5 6 7", operation="complement"))
        assert data["result"] == [8, 9, 10, 11]

    def test_every_operation_dispatched(self):
        """Each operation has its own branch; only 'sort' sorts."""
        sorted_results = [
            op
            for op in TransformOperation
            if _apply_operation(op, [3, 1, 2], n=1, x=0, y=1) == [1, 2, 3]
        ]
        assert sorted_results == [TransformOperation.SORT]

    @pytest.mark.asyncio
    async def test_transform_missing_parameter(self):
        """Operations needing n report it."""
        tools = register_form_tools(MockMCPServer("test"))
        data = json.loads(await tools["pcset_transform"](pitch_classes=[0, 4, 7], operation="T"))
        assert data["status"] == "error"
        assert "'n'" in data["message"]

    @pytest.mark.asyncio
    async def test_transform_unknown_operation(self):
        """Unknown operations are rejected."""
        tools = register_form_tools(MockMCPServer("test"))
        data = json.loads(
            await tools["pcset_transform"](pitch_classes=[0, 4, 7], operation="M5")
        )
        assert data["status"] == "error"
        assert "Unknown operation" in data["message"]

    @pytest.mark.asyncio
    async def test_bad_pitch_name(self):
        """Unparseable input returns an error envelope."""
        tools = register_form_tools(MockMCPServer("test"))
        data = json.loads(await tools["pcset_normal_form"](pitch_classes="C H"))
        assert data["status"] == "error"
        assert "Unknown pitch class" in data["message"]


class TestFeatureTools:
    """Tests for feature tools."""

    @pytest.mark.asyncio
    async def test_interval_vectors(self):
        """Both vectors for the major scale."""
        tools = register_feature_tools(MockMCPServer("test"))
        data = json.loads(
            await tools["pcset_interval_vectors"](pitch_classes=[0, 2, 4, 5, 7, 9, 11])
        )
        assert data["status"] == "success"
        assert data["interval_class_vector"] == [2, 5, 4, 3, 6, 1]
        assert sum(data["interval_vector"]) == 49

    @pytest.mark.asyncio
    async def test_chroma(self):
        """Chroma as integer and binary string."""
        tools = register_feature_tools(MockMCPServer("test"))
        data = json.loads(await tools["pcset_chroma"](pitch_classes=[0, 2, 4]))
        assert data["chroma"] == 21
        assert data["binary"] == "000000010101"

    @pytest.mark.asyncio
    async def test_analyze_with_catalog(self, catalog: SetClassCatalog):
        """Analysis includes catalogue names."""
        tools = register_feature_tools(MockMCPServer("test"), catalog)
        data = json.loads(await tools["pcset_analyze"](pitch_classes="G B D F"))
        assert data["status"] == "success"
        analysis = data["analysis"]
        assert analysis["normal_form"] == [11, 2, 5, 7]
        assert set(analysis["names"]) == {"dominant_seventh", "half_diminished_seventh"}

    @pytest.mark.asyncio
    async def test_analyze_without_catalog(self):
        """Analysis works with no catalogue."""
        tools = register_feature_tools(MockMCPServer("test"))
        data = json.loads(await tools["pcset_analyze"](pitch_classes=[]))
        assert data["status"] == "success"
        assert data["analysis"]["names"] == []
        assert data["analysis"]["prime_form"] == []


class TestRelationTools:
    """Tests for relation tools."""

    @pytest.mark.asyncio
    async def test_relate_transposition(self):
        """C major to D major."""
        tools = register_relation_tools(MockMCPServer("test"))
        data = json.loads(await tools["pcset_relate"](source="C E G", target="D F# A"))
        assert data["status"] == "success"
        assert data["relation"]["transposition_number"] == 2
        assert data["relation"]["index_number"] is None
        assert data["message"] == "Target is T2 of source."

    @pytest.mark.asyncio
    async def test_relate_inversion_in_normal_form(self):
        """C major to C minor in normal order."""
        tools = register_relation_tools(MockMCPServer("test"))
        data = json.loads(
            await tools["pcset_relate"](source=[0, 4, 7], target=[0, 3, 7], use_normal_form=True)
        )
        assert data["relation"]["index_number"] == 7
        assert data["message"] == "Target is T7I of source."

    @pytest.mark.asyncio
    async def test_relate_unrelated(self):
        """Different lengths are simply unrelated."""
        tools = register_relation_tools(MockMCPServer("test"))
        data = json.loads(await tools["pcset_relate"](source=[0, 4, 7], target=[0, 4]))
        assert data["status"] == "success"
        assert data["relation"]["transposition_number"] is None
        assert "not related" in data["message"]


class TestCatalogTools:
    """Tests for catalogue tools."""

    @pytest.mark.asyncio
    async def test_list_set_classes(self, catalog: SetClassCatalog):
        """List by family."""
        tools = register_catalog_tools(MockMCPServer("test"), catalog)
        data = json.loads(await tools["pcset_list_set_classes"](family="sevenths"))
        assert data["status"] == "success"
        assert data["families"] == ["scales", "sevenths", "triads"]
        assert len(data["set_classes"]) == 6

    @pytest.mark.asyncio
    async def test_identify(self, catalog: SetClassCatalog):
        """Identify a whole-tone scale from note names."""
        tools = register_catalog_tools(MockMCPServer("test"), catalog)
        data = json.loads(await tools["pcset_identify"](pitch_classes="C# D# F G A B"))
        assert data["status"] == "success"
        assert data["prime_form"] == [0, 2, 4, 6, 8, 10]
        assert data["matches"] == ["whole_tone"]
