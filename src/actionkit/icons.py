"""Renderable icons of the explorer entities"""

import dataclasses
import html
import typing as t
from urllib.parse import urljoin, urlparse

from .config.constants import C

__all__ = [
    "Icon",
    "MethodIcon",
    "EntityIcon",
    "DatabaseIcon",
    "DB_QUERY_ICON",
    "get_asset_url",
]

METHOD_COLORS: t.Dict[str, str] = {
    "GET": "#457AE6",
    "POST": "#EABB0C",
    "PUT": "#5BB749",
    "DELETE": "#E22C2C",
    "PATCH": "#6D6D6D",
}
DEFAULT_METHOD_COLOR: str = "#858282"


class Icon:
    """Base class for all renderable icons"""

    def render(self) -> str:
        """Markup representation"""
        raise NotImplementedError


@dataclasses.dataclass(frozen=True)
class MethodIcon(Icon):
    """HTTP method badge"""

    method: str

    @property
    def color(self) -> str:
        """Badge color"""
        return METHOD_COLORS.get(self.method.upper(), DEFAULT_METHOD_COLOR)

    def render(self) -> str:
        label: str = html.escape(self.method.upper())
        return f'<span class="t--apiFormHttpMethod" style="color: {self.color}">{label}</span>'


@dataclasses.dataclass(frozen=True)
class EntityIcon(Icon):
    """Fixed-size container around an image asset"""

    src: str
    width: int
    height: int

    def render(self) -> str:
        return (
            f'<span class="entity-icon" style="width: {self.width}px; height: {self.height}px">'
            f'<img alt="entityIcon" src="{html.escape(self.src, quote=True)}"/>'
            "</span>"
        )


@dataclasses.dataclass(frozen=True)
class DatabaseIcon(Icon):
    """Generic database query glyph"""

    def render(self) -> str:
        return '<span class="entity-icon" data-icon="db-query"></span>'


DB_QUERY_ICON: DatabaseIcon = DatabaseIcon()


def get_asset_url(raw_path: str) -> str:
    """Rewrite a plugin icon location into a deployable URL.
    Absolute URLs are kept; relative ones are resolved against the assets base URL, if configured."""
    base_url: str = C.ASSETS_BASE_URL
    if not base_url or urlparse(raw_path).scheme:
        return raw_path
    return urljoin(base_url.rstrip("/") + "/", raw_path.lstrip("/"))
