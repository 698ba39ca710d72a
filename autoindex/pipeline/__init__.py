"""
Pipeline Module - Index Pipeline

Handles the flow from a page location to composed render rows:
Normalize → Lookup → Fetch Tree → Compose (with Detail per branch)
"""

from autoindex.pipeline.paths import normalize_path, parse_depth
from autoindex.pipeline.client import WikiClient
from autoindex.pipeline.lookup import PageLookup
from autoindex.pipeline.tree_fetcher import TreeFetcher
from autoindex.pipeline.detail import DetailAugmenter
from autoindex.pipeline.composer import TreeComposer

__all__ = [
    "normalize_path",
    "parse_depth",
    "WikiClient",
    "PageLookup",
    "TreeFetcher",
    "DetailAugmenter",
    "TreeComposer",
]
