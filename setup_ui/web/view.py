"""
Rendering context handed to widgets: builds image and link tags.
"""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Mapping, Optional
from urllib.parse import urlencode

ABSOLUTE_PREFIXES = ("http://", "https://", "//", "/", "data:")


@dataclass
class RenderContext:
    base_url: str = ""

    def url(self, target: str, params: Optional[Mapping[str, object]] = None) -> str:
        """Resolve `target` against the base url and append query parameters."""
        href = target
        if self.base_url and not target.startswith(ABSOLUTE_PREFIXES):
            href = f"{self.base_url.rstrip('/')}/{target.lstrip('/')}"
        if params:
            separator = "&" if "?" in href else "?"
            href = f"{href}{separator}{urlencode(params, doseq=True)}"
        return href

    def img(
        self,
        src: str,
        width: Optional[int] = None,
        height: Optional[int] = None,
        alt: str = "",
    ) -> str:
        attrs = [f'src="{escape(self.url(src))}"', f'alt="{escape(alt)}"']
        if width is not None:
            attrs.append(f'width="{int(width)}"')
        if height is not None:
            attrs.append(f'height="{int(height)}"')
        return f"<img {' '.join(attrs)}/>"

    def qlink(
        self,
        caption: str,
        target: str,
        params: Optional[Mapping[str, object]] = None,
        quote: bool = True,
    ) -> str:
        """Build an anchor; with `quote=False` the caption is inserted as markup."""
        text = escape(caption) if quote else caption
        return f'<a href="{escape(self.url(target, params))}">{text}</a>'
