"""
autoindex - Site Index Renderer

Builds a depth-bounded page index from a wiki content-tree API.
"""

__version__ = "0.1.0"
