"""
Container widget owning an ordered group of tabs.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from setup_ui.config import TabConfig
from setup_ui.exceptions import ConfigurationError
from setup_ui.web.widgets.tab import Tab, TabProperties, TabRenderContext

logger = logging.getLogger(__name__)


class Tabs:
    """Ordered tab group; `activate` leaves exactly one tab active."""

    def __init__(self, tabs: Iterable[Union[Tab, TabProperties, Mapping[str, Any]]] = ()) -> None:
        self._tabs: Dict[str, Tab] = {}
        for tab in tabs:
            self.add(tab)

    @classmethod
    def from_config(cls, tab_configs: Iterable[TabConfig]) -> "Tabs":
        return cls(
            TabProperties(
                name=cfg.key,
                title=cfg.title,
                url=cfg.url,
                url_params=dict(cfg.url_params),
                icon=cfg.icon,
                icon_cls=cfg.icon_cls,
            )
            for cfg in tab_configs
        )

    def add(self, tab: Union[Tab, TabProperties, Mapping[str, Any]]) -> "Tabs":
        if not isinstance(tab, Tab):
            tab = Tab(tab)
        name = tab.get_name()
        if name in self._tabs:
            raise ConfigurationError(f"Duplicate tab name {name!r}")
        self._tabs[name] = tab
        return self

    def get(self, name: str) -> Optional[Tab]:
        return self._tabs.get(name)

    def names(self) -> List[str]:
        return list(self._tabs)

    def activate(self, name: str) -> "Tabs":
        if name not in self._tabs:
            raise ConfigurationError(f"Cannot activate unknown tab {name!r}")
        for tab_name, tab in self._tabs.items():
            tab.set_active(tab_name == name)
        logger.debug("Activated tab %r", name)
        return self

    def get_active_name(self) -> Optional[str]:
        for name, tab in self._tabs.items():
            if tab.active:
                return name
        return None

    def render(self, context: TabRenderContext) -> str:
        if not self._tabs:
            return ""
        items = "".join(tab.render(context) for tab in self._tabs.values())
        return f'<ul class="tabs">\n{items}</ul>\n'

    def __iter__(self) -> Iterator[Tab]:
        return iter(self._tabs.values())

    def __len__(self) -> int:
        return len(self._tabs)
