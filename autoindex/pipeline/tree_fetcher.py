"""
Pipeline - Tree Fetcher

Depth-bounded recursive retrieval of a page's descendant tree.
"""

import logging
from typing import List

from pydantic import ValidationError

from autoindex.exceptions import RecursionAborted, TransportFailure
from autoindex.schemas.page import TreeNode

logger = logging.getLogger(__name__)


class TreeFetcher:
    """
    Fetches descendants level by level, depth-first and sequentially.

    Each node's subtree is fully resolved before its next sibling is fetched,
    so the number of in-flight requests is always one.
    """

    def __init__(self, client, max_depth: int = 1):
        if max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {max_depth}")
        self.client = client
        self.max_depth = max_depth

    async def fetch(self, page_id: int, level: int = 0) -> List[TreeNode]:
        """
        Fetch the tree below ``page_id``.

        Args:
            page_id: Parent tree id
            level: Current level, 0 for the root call

        Returns:
            Sibling nodes in API order; ``children`` is set on every node
            while ``level < max_depth`` and left None below that

        Raises:
            TransportFailure: If the root level fetch fails
            RecursionAborted: If any deeper fetch fails
        """
        try:
            entries = await self.client.fetch_tree(parent_id=page_id, mode="ALL", locale="")
            try:
                nodes = [TreeNode.model_validate(entry) for entry in entries]
            except ValidationError as e:
                raise TransportFailure(f"Malformed tree entry under page {page_id}") from e
        except TransportFailure as e:
            if level == 0:
                raise
            raise RecursionAborted(page_id, level, e) from e

        logger.debug(f"Page {page_id} level {level}: {len(nodes)} entries")

        if level < self.max_depth:
            for node in nodes:
                node.children = await self.fetch(node.id, level + 1)

        return nodes
