"""
Set-class catalogue - human names for prime forms.

The catalogue ships common chords and scales and can be extended with
project YAML files.
"""

from chuk_mcp_pcset.catalog.loader import SetClassCatalog

__all__ = ["SetClassCatalog"]
