"""
MCP Tool - render_site_index

Render the page index below a wiki path.
"""

from typing import Optional

from fastmcp import FastMCP

from autoindex.config import get_settings
from autoindex.exceptions import AutoIndexError
from autoindex.services import AutoIndex, HtmlRenderSink

router = FastMCP("render_site_index")


async def build_index(path: str, depth: Optional[int] = None, settings=None) -> dict:
    """
    Render the index for ``path`` and return it as HTML and rows.

    Errors are reported in the result instead of raised.
    """
    settings = settings or get_settings()
    sink = HtmlRenderSink(heading=settings.index.heading)
    attributes = {"path": path}
    if depth is not None:
        attributes["depth"] = str(depth)

    widget = AutoIndex(sink, settings=settings, attributes=attributes)

    try:
        composed = await widget.render()
    except AutoIndexError as e:
        return {"error": str(e), "path": widget.path}

    return {
        "path": widget.path,
        "depth": widget.depth,
        "html": sink.to_html(),
        "tree": composed.model_dump() if composed is not None else None,
    }


@router.tool()
async def render_site_index(
    path: str,
    depth: Optional[int] = None,
) -> dict:
    """
    Render a site index for a wiki page.

    Walks the page tree below the given path and returns the nested index,
    with short descriptions for pages that have sub-pages.

    Args:
        path: Page location, e.g. "/en/docs" or "docs"
        depth: Number of levels to include (default from settings)

    Returns:
        Index HTML and composed rows, or an error message
    """
    return await build_index(path, depth)
