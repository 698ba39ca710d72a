"""
Services - Render Sinks

Presentation boundary for composed index output.
"""

from abc import ABC, abstractmethod
from typing import Optional

from bs4 import BeautifulSoup, Tag

from autoindex.schemas.render import (
    DescriptionRow,
    RenderContainer,
    Separator,
    TitleRow,
)


class RenderSink(ABC):
    """Receives composed output. ``None`` clears the target."""

    @abstractmethod
    def show(self, container: Optional[RenderContainer]) -> None:
        """
        Replace the displayed content.

        Args:
            container: Composed rows, or None to clear
        """
        pass


class MemoryRenderSink(RenderSink):
    """Keeps the current content and counts attached containers."""

    def __init__(self):
        self.content: Optional[RenderContainer] = None
        self.render_count = 0

    def show(self, container: Optional[RenderContainer]) -> None:
        self.content = container
        if container is not None:
            self.render_count += 1

    @property
    def is_empty(self) -> bool:
        return self.content is None


class HtmlRenderSink(MemoryRenderSink):
    """Renders the current content as an HTML fragment under a heading."""

    def __init__(self, heading: str = "Index"):
        super().__init__()
        self.heading = heading

    def to_html(self) -> str:
        """
        Build the widget markup.

        Titles become ``<p><a>`` rows, descriptions ``<sup>`` rows and
        separators ``<hr>``; nested containers become ``<div>`` blocks.
        """
        soup = BeautifulSoup("", "html.parser")
        root = soup.new_tag("div", attrs={"class": "auto-index"})

        header = soup.new_tag("h1", attrs={"style": "margin: 0;"})
        header.string = self.heading
        root.append(header)

        if self.content is not None:
            root.append(self._build_container(soup, self.content))

        return str(root)

    def _build_container(self, soup: BeautifulSoup, container: RenderContainer) -> Tag:
        div = soup.new_tag("div")
        for item in container.items:
            if isinstance(item, RenderContainer):
                div.append(self._build_container(soup, item))
            elif isinstance(item, TitleRow):
                div.append(self._build_title(soup, item))
            elif isinstance(item, DescriptionRow):
                sup = soup.new_tag("sup", attrs={
                    "style": f"text-indent: {item.indent}rem; display: inline-block;",
                })
                sup.string = item.text
                div.append(sup)
            elif isinstance(item, Separator):
                div.append(soup.new_tag("hr"))
        return div

    def _build_title(self, soup: BeautifulSoup, row: TitleRow) -> Tag:
        style = f"text-indent: {row.indent}rem;"
        if row.font_scale is not None:
            style = f"font-size: {row.font_scale:g}rem; " + style

        p = soup.new_tag("p", attrs={"style": style})
        link = soup.new_tag("a", attrs={"href": row.href})
        link.string = row.title
        p.append(link)
        return p
