"""
Services Module - Widget Layer

Provides the index widget and its render sinks.
"""

from autoindex.services.index_service import AutoIndex
from autoindex.services.render_sink import RenderSink, MemoryRenderSink, HtmlRenderSink

__all__ = [
    "AutoIndex",
    "RenderSink",
    "MemoryRenderSink",
    "HtmlRenderSink",
]
