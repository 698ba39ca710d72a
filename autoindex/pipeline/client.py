"""
Pipeline - Wiki Client

GraphQL transport for the page tree and page detail queries.
"""

import logging
import httpx
from typing import Optional, List, Dict, Any

from autoindex.config import get_settings
from autoindex.exceptions import TransportFailure

logger = logging.getLogger(__name__)


TREE_QUERY = """
query ($parent: Int, $path: String, $mode: PageTreeMode!, $locale: String!) {
    pages {
        tree(parent: $parent, path: $path, mode: $mode, locale: $locale) {
            id
            title
            path
            pageId
        }
    }
}
"""

DETAIL_QUERY = """
query ($id: Int!) {
    pages {
        single(id: $id) {
            id
            title
            description
            path
        }
    }
}
"""


class WikiClient:
    """Issues page queries against the wiki GraphQL endpoint."""

    def __init__(
        self,
        settings=None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.url = (
            self.settings.wiki.base_url.rstrip("/") + self.settings.wiki.graphql_path
        )
        self.timeout = self.settings.wiki.timeout_s
        # Credentials, if any, are the caller's business.
        self.headers = dict(headers or {})
        self._transport = transport

    async def fetch_tree(
        self,
        parent_id: Optional[int] = None,
        path: Optional[str] = None,
        mode: str = "ALL",
        locale: str = "",
    ) -> List[Dict[str, Any]]:
        """
        Fetch one level of the page tree.

        Args:
            parent_id: Parent page tree id (per-level expansion)
            path: Page path (root resolution)
            mode: Tree mode, ALL / FOLDERS / PAGES
            locale: Locale filter, empty for all

        Returns:
            Entries in API order, each with id, title, path and pageId
        """
        variables = {
            "parent": parent_id,
            "path": path,
            "mode": mode,
            "locale": locale,
        }
        data = await self._query(TREE_QUERY, variables)
        return data["pages"].get("tree") or []

    async def fetch_detail(self, page_id: int) -> Optional[Dict[str, Any]]:
        """
        Fetch a single page record.

        Args:
            page_id: Page id

        Returns:
            Dict with id, title, description and path, or None if not found
        """
        data = await self._query(DETAIL_QUERY, {"id": page_id})
        return data["pages"].get("single")

    async def _query(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        """POST a GraphQL document and return its ``data`` payload."""
        payload = {"query": query, "variables": variables}

        async with httpx.AsyncClient(
            headers=self.headers,
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(self.url, json=payload)
                response.raise_for_status()
                body = response.json()
            except httpx.HTTPError as e:
                logger.error(f"Wiki request to {self.url} failed: {e}")
                raise TransportFailure(f"Request to {self.url} failed: {e}") from e
            except ValueError as e:
                logger.error(f"Wiki response from {self.url} is not JSON: {e}")
                raise TransportFailure(f"Invalid JSON from {self.url}") from e

        if not isinstance(body, dict):
            logger.error(f"Wiki response from {self.url} is not an object")
            raise TransportFailure(f"Unexpected response body from {self.url}")

        if body.get("errors"):
            messages = "; ".join(
                err.get("message", "unknown error") for err in body["errors"]
            )
            raise TransportFailure(f"GraphQL error: {messages}")

        data = body.get("data")
        if not isinstance(data, dict) or not isinstance(data.get("pages"), dict):
            raise TransportFailure("GraphQL response has no pages data")

        return data
