"""
Schemas Module - Pydantic Models

Data models for page trees and composed render output.
"""

from autoindex.schemas.page import PageRef, TreeNode, PageDetail
from autoindex.schemas.render import (
    TitleRow,
    DescriptionRow,
    Separator,
    RenderContainer,
)

__all__ = [
    "PageRef",
    "TreeNode",
    "PageDetail",
    "TitleRow",
    "DescriptionRow",
    "Separator",
    "RenderContainer",
]
