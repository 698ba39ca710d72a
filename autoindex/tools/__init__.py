"""
Tools Module - MCP Tool Implementations
"""

from autoindex.tools import render_index

__all__ = [
    "render_index",
]
