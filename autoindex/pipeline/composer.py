"""
Pipeline - Tree Composer

Turns a fetched page tree into render rows with depth-scaled typography.
"""

from typing import List, Optional, Union

from autoindex.pipeline.detail import DetailAugmenter
from autoindex.schemas.page import TreeNode
from autoindex.schemas.render import (
    DescriptionRow,
    RenderContainer,
    Separator,
    TitleRow,
)

RenderItem = Union[TitleRow, DescriptionRow, Separator, RenderContainer]


def font_scale_for(level: int) -> float:
    """Title scale shrinks by 0.1 per level, never below 1."""
    return max(1, 1.4 - level / 10)


class TreeComposer:
    """Composes TreeNode lists into nested render containers."""

    def __init__(self, augmenter: DetailAugmenter, max_depth: int = 1):
        self.augmenter = augmenter
        self.max_depth = max_depth

    async def compose(
        self,
        tree: List[TreeNode],
        level: int = 0,
    ) -> Optional[RenderContainer]:
        """
        Compose one tree level and everything below it.

        Nodes are handled strictly in order: title, optional description,
        then the nested children, each awaited before the next sibling.

        Args:
            tree: Sibling nodes from TreeFetcher
            level: Current level, 0 for the root call

        Returns:
            RenderContainer, or None when it would hold no rows
        """
        items: List[RenderItem] = []
        deepest = level == self.max_depth

        for node in tree:
            items.append(TitleRow(
                title=node.title,
                href=f"/{node.path}",
                indent=level,
                font_scale=None if deepest else font_scale_for(level),
            ))

            # Deepest nodes never had children fetched. Skipping the
            # description still composes children and the separator below.
            if not deepest and node.page_id and node.children:
                detail = await self.augmenter.fetch(node.page_id)
                if detail is not None:
                    items.append(DescriptionRow(
                        text=detail.description or "",
                        indent=level,
                    ))

            if node.children is not None:
                nested = await self.compose(node.children, level + 1)
                if nested is not None:
                    items.append(nested)

            if level == 0:
                items.append(Separator())

        if not items:
            return None

        return RenderContainer(items=items)
