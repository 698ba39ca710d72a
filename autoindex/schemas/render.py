"""
Schemas - Render Models

Render-ready rows produced by the tree composer and consumed by render sinks.
"""

from pydantic import BaseModel
from typing import List, Literal, Optional, Union


class TitleRow(BaseModel):
    """Page title linking to the page. ``font_scale`` None means default size."""
    kind: Literal["title"] = "title"
    title: str
    href: str
    indent: int
    font_scale: Optional[float] = None


class DescriptionRow(BaseModel):
    """Supplementary description shown beneath a title row."""
    kind: Literal["description"] = "description"
    text: str
    indent: int


class Separator(BaseModel):
    """Visual break after a top-level subtree."""
    kind: Literal["separator"] = "separator"


class RenderContainer(BaseModel):
    """Ordered rows and nested containers. Never built empty."""
    kind: Literal["container"] = "container"
    items: List[Union[TitleRow, DescriptionRow, Separator, "RenderContainer"]]

    def iter_rows(self):
        """Yield rows depth-first in display order."""
        for item in self.items:
            if isinstance(item, RenderContainer):
                yield from item.iter_rows()
            else:
                yield item


RenderContainer.model_rebuild()
