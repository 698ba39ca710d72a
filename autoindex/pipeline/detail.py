"""
Pipeline - Detail Augmenter

Lazy per-node page detail lookup.
"""

from typing import Optional

from pydantic import ValidationError

from autoindex.exceptions import TransportFailure
from autoindex.schemas.page import PageDetail


class DetailAugmenter:
    """Fetches the detail record used to decorate a branch node. Not cached."""

    def __init__(self, client):
        self.client = client

    async def fetch(self, page_id: Optional[int]) -> Optional[PageDetail]:
        """
        Fetch page detail by id.

        Args:
            page_id: Page id, may be None for folder entries

        Returns:
            PageDetail, or None when there is no id or no such page
        """
        if not page_id:
            return None

        data = await self.client.fetch_detail(page_id)
        if not data:
            return None

        try:
            return PageDetail.model_validate(data)
        except ValidationError as e:
            raise TransportFailure(f"Malformed detail for page {page_id}") from e
