"""
Tests for the command-line options of the server entry point.
"""

from pathlib import Path

import pytest

from chuk_mcp_pcset.server import build_parser


class TestParser:
    """Tests for build_parser()."""

    def test_defaults(self) -> None:
        """stdio on port 8000 with the default project directory."""
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.set_classes is None
        assert not args.debug

    def test_http_with_set_classes(self) -> None:
        """All options parse to typed values."""
        args = build_parser().parse_args(
            ["--transport", "http", "--port", "9001", "--set-classes", "my/sets", "--debug"]
        )
        assert args.transport == "http"
        assert args.port == 9001
        assert args.set_classes == Path("my/sets")
        assert args.debug

    def test_unknown_transport(self) -> None:
        """Only stdio and http are accepted."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--transport", "sse"])
