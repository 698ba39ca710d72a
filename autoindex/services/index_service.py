"""
Services - Index Service

Site-index widget: resolves the current page and renders its subtree.
"""

import logging
from typing import Dict, Optional, Union

from autoindex.config import get_settings
from autoindex.pipeline.client import WikiClient
from autoindex.pipeline.composer import TreeComposer
from autoindex.pipeline.detail import DetailAugmenter
from autoindex.pipeline.lookup import PageLookup
from autoindex.pipeline.paths import normalize_path, parse_depth
from autoindex.pipeline.tree_fetcher import TreeFetcher
from autoindex.schemas.render import RenderContainer
from autoindex.services.render_sink import RenderSink

logger = logging.getLogger(__name__)


class AutoIndex:
    """
    Index widget bound to one render sink.

    Flow:
    1. Clear the sink
    2. Normalize the path and look up the root page id
    3. Fetch the tree down to ``depth`` levels
    4. Compose rows and attach them, unless there are none

    Only one render runs at a time; a render requested while another is in
    progress is dropped, not queued. Failures leave the sink cleared.
    """

    OBSERVED_ATTRIBUTES = ("depth", "path")

    def __init__(
        self,
        sink: RenderSink,
        client=None,
        settings=None,
        location: Optional[str] = None,
        attributes: Optional[Dict[str, str]] = None,
    ):
        self.settings = settings or get_settings()
        self.sink = sink
        self.client = client or WikiClient(self.settings)
        self.location = location or self.settings.index.default_path
        self.attributes: Dict[str, str] = dict(attributes or {})
        self._rendering = False

    @property
    def depth(self) -> int:
        value = self.attributes.get("depth")
        if value is None:
            return self.settings.index.depth
        return parse_depth(value)

    @property
    def path(self) -> str:
        return normalize_path(self.attributes.get("path") or self.location)

    @property
    def is_rendering(self) -> bool:
        return self._rendering

    async def connect(self) -> Optional[RenderContainer]:
        """Initial render when the widget is attached."""
        return await self.render()

    async def set_attribute(
        self,
        name: str,
        value: Union[str, int],
    ) -> Optional[RenderContainer]:
        """
        Update an observed attribute and re-render.

        Raises:
            ValueError: If ``name`` is not an observed attribute
        """
        if name not in self.OBSERVED_ATTRIBUTES:
            raise ValueError(f"Unknown attribute: {name}")

        self.attributes[name] = str(value)
        return await self.render()

    async def render(self) -> Optional[RenderContainer]:
        """
        Run the full pipeline and attach the result to the sink.

        Returns:
            The attached container, or None if nothing was attached
            (empty tree, or a render already in progress)
        """
        if self._rendering:
            logger.debug("Render already in progress, skipping")
            return None

        self._rendering = True
        try:
            self.sink.show(None)

            depth = self.depth
            path = self.path
            logger.info(f"Rendering index for '{path}' (depth {depth})")

            lookup = PageLookup(self.client)
            fetcher = TreeFetcher(self.client, max_depth=depth)
            composer = TreeComposer(DetailAugmenter(self.client), max_depth=depth)

            root_id = await lookup.resolve(path)
            tree = await fetcher.fetch(root_id)
            composed = await composer.compose(tree)

            if composed is not None:
                self.sink.show(composed)
            return composed
        finally:
            self._rendering = False
