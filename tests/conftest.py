"""
Shared fixtures for autoindex tests.
"""

import copy

import pytest
from unittest.mock import AsyncMock, MagicMock

from autoindex.config import IndexSettings, LogSettings, MCPSettings, Settings, WikiSettings


@pytest.fixture
def settings():
    """Settings that never touch the environment's wiki."""
    return Settings(
        wiki=WikiSettings(base_url="http://wiki.test", graphql_path="/graphql", timeout_s=5.0),
        index=IndexSettings(depth=1, default_path="/", heading="Index"),
        mcp=MCPSettings(),
        log=LogSettings(),
    )


def _make_client(lookup=None, trees=None, details=None):
    """
    Build a client double backed by dicts.

    lookup: path -> entries returned for root resolution
    trees: parent id -> entries returned for level expansion
    details: page id -> detail record
    """
    lookup = lookup or {}
    trees = trees or {}
    details = details or {}

    async def fetch_tree(parent_id=None, path=None, mode="ALL", locale=""):
        if path is not None:
            return copy.deepcopy(lookup.get(path, []))
        return copy.deepcopy(trees.get(parent_id, []))

    async def fetch_detail(page_id):
        return copy.deepcopy(details.get(page_id))

    client = MagicMock()
    client.fetch_tree = AsyncMock(side_effect=fetch_tree)
    client.fetch_detail = AsyncMock(side_effect=fetch_detail)
    return client


@pytest.fixture
def make_client():
    return _make_client


def node(id, title, path, page_id=None):
    """Tree entry as the API returns it."""
    return {"id": id, "title": title, "path": path, "pageId": page_id}


@pytest.fixture
def entry():
    return node
