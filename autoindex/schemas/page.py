"""
Schemas - Page Models

Pydantic models for wiki page tree data.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class PageRef(BaseModel):
    """Minimal page identity used for path lookup."""
    id: int
    path: str


class TreeNode(BaseModel):
    """
    One entry of a page tree level.

    ``children`` stays None until the level below has been fetched; an empty
    list means it was fetched and had no entries.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    path: str
    page_id: Optional[int] = Field(None, alias="pageId")
    children: Optional[List["TreeNode"]] = None


class PageDetail(BaseModel):
    """Single page detail used to decorate branch nodes."""
    id: int
    title: str
    description: Optional[str] = None
    path: str


# Allow recursive model
TreeNode.model_rebuild()
