"""
A single navigation tab, usually used through the `Tabs` container.

Renders an `<li>` list item with an optional link and icon.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional, Protocol, Union

from setup_ui.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ICON_SIZE = 16

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class TabRenderContext(Protocol):
    def img(self, src: str, width: Optional[int] = None, height: Optional[int] = None) -> str:
        ...

    def qlink(
        self,
        caption: str,
        target: str,
        params: Optional[Mapping[str, Any]] = None,
        quote: bool = True,
    ) -> str:
        ...


@dataclass(frozen=True)
class ImageIcon:
    src: str


@dataclass(frozen=True)
class IconClass:
    name: str


CaptionDecoration = Union[ImageIcon, IconClass, None]


@dataclass
class TabProperties:
    name: Optional[str] = None
    title: str = ""
    url: Optional[str] = None
    url_params: Dict[str, Any] = field(default_factory=dict)
    icon: Optional[str] = None
    icon_cls: Optional[str] = None
    active: bool = False


def _setter_name(key: str) -> str:
    return "set_" + _CAMEL_BOUNDARY.sub("_", key).lower()


class Tab:
    """
    Navigation item holding display properties and an active flag.

    Properties can be given as a `TabProperties` record, a mapping or keyword
    arguments. Mapping keys are routed to the matching `set_<key>` method
    (camelCase keys such as ``iconCls`` are accepted); unknown keys are ignored.
    """

    def __init__(
        self,
        properties: Union[TabProperties, Mapping[str, Any], None] = None,
        **kwargs: Any,
    ) -> None:
        self._name: Optional[str] = None
        self._title: str = ""
        self._url: Optional[str] = None
        self._url_params: Dict[str, Any] = {}
        self._icon: Optional[str] = None
        self._icon_cls: Optional[str] = None
        self._active = False

        if isinstance(properties, TabProperties):
            self._apply({f.name: getattr(properties, f.name) for f in fields(properties)})
        elif properties is not None:
            self._apply(properties)
        self._apply(kwargs)

        if self._name is None or self._name == "":
            raise ConfigurationError("Cannot create a nameless tab")

    @classmethod
    def from_properties(cls, properties: Mapping[str, Any]) -> "Tab":
        return cls(properties)

    def _apply(self, properties: Mapping[str, Any]) -> None:
        for key, value in properties.items():
            setter = getattr(self, _setter_name(key), None)
            if callable(setter):
                setter(value)
            else:
                logger.debug("Ignoring unknown tab property %r", key)

    def set_icon(self, icon: Optional[str]) -> None:
        """Set the url of an image shown in front of the title."""
        self._icon = icon

    def set_icon_cls(self, icon_cls: Optional[str]) -> None:
        """Set an icon class used in an `<i>` tag when no icon image is set."""
        self._icon_cls = icon_cls

    def set_name(self, name: Optional[str]) -> None:
        self._name = name

    def get_name(self) -> Optional[str]:
        return self._name

    @property
    def name(self) -> Optional[str]:
        return self._name

    def set_title(self, title: Optional[str]) -> None:
        self._title = title or ""

    @property
    def title(self) -> str:
        return self._title

    def set_url(self, url: Optional[str]) -> None:
        self._url = url

    @property
    def url(self) -> Optional[str]:
        return self._url

    def set_url_params(self, url_params: Optional[Mapping[str, Any]]) -> None:
        self._url_params = dict(url_params or {})

    @property
    def url_params(self) -> Dict[str, Any]:
        return dict(self._url_params)

    def set_active(self, active: bool = True) -> "Tab":
        """
        Set this tab active (default) or inactive.

        This is usually done through the `Tabs` container, so calling it
        directly is rarely what you want.
        """
        self._active = bool(active)
        return self

    @property
    def active(self) -> bool:
        return self._active

    @property
    def decoration(self) -> CaptionDecoration:
        if self._icon is not None:
            return ImageIcon(self._icon)
        if self._icon_cls is not None:
            return IconClass(self._icon_cls)
        return None

    def _caption(self, context: TabRenderContext) -> str:
        decoration = self.decoration
        if isinstance(decoration, ImageIcon):
            icon = context.img(decoration.src, width=ICON_SIZE, height=ICON_SIZE)
            return f"{icon} {self._title}"
        if isinstance(decoration, IconClass):
            return f'<i class="icon-{decoration.name}"></i> {self._title}'
        return self._title

    def render(self, context: TabRenderContext) -> str:
        class_attr = 'class="active"' if self._active else ""
        caption = self._caption(context)
        if self._url is not None:
            body = context.qlink(caption, self._url, self._url_params, quote=False)
        else:
            body = caption
        return f"<li {class_attr}>{body}</li>\n"

    def __repr__(self) -> str:
        return f"Tab(name={self._name!r}, active={self._active})"
