"""
Pipeline - Page Lookup

Resolves a normalized page path to its tree id.
"""

import logging
from typing import List

from pydantic import ValidationError

from autoindex.exceptions import LookupNotFound, TransportFailure
from autoindex.schemas.page import PageRef

logger = logging.getLogger(__name__)


class PageLookup:
    """Finds the page whose path matches exactly."""

    def __init__(self, client):
        self.client = client

    async def resolve(self, path: str) -> int:
        """
        Resolve a normalized path to a page id.

        Args:
            path: Normalized path (no leading slash, no locale)

        Returns:
            Tree id of the first entry whose path equals ``path``

        Raises:
            LookupNotFound: If no entry matches
            TransportFailure: If an entry does not match the page schema
        """
        entries = await self.client.fetch_tree(path=path, mode="ALL", locale="")
        try:
            refs: List[PageRef] = [PageRef.model_validate(entry) for entry in entries]
        except ValidationError as e:
            raise TransportFailure(f"Malformed tree entry for path '{path}'") from e

        for ref in refs:
            if ref.path == path:
                logger.debug(f"Resolved '{path}' to page {ref.id}")
                return ref.id

        raise LookupNotFound(path)
