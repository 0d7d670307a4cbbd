"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import streamlit as st


def _get_secret(name: str, default: str | None = None) -> str | None:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml exists outside the Streamlit runtime
        pass
    return default


@dataclass(frozen=True)
class TabConfig:
    key: str
    title: str
    url: Optional[str] = None
    url_params: Dict[str, str] = field(default_factory=dict)
    icon: Optional[str] = None
    icon_cls: Optional[str] = None


BASE_URL: str = _get_secret("SETUP_UI_BASE_URL", "") or ""
LOG_LEVEL: str = (_get_secret("SETUP_UI_LOG_LEVEL", "INFO") or "INFO").upper()
LOCALE_DIR: str = _get_secret(
    "SETUP_UI_LOCALE_DIR",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "locale"),
) or ""

DEFAULT_FILEMODE: str = _get_secret("SETUP_UI_DEFAULT_FILEMODE", "2664") or "2664"
DEFAULT_MODULE_PATH: str = _get_secret("SETUP_UI_MODULE_PATH", "/usr/share/setup-ui/modules") or ""
DEFAULT_LOG_FILE: str = _get_secret("SETUP_UI_DEFAULT_LOG_FILE", "/var/log/setup-ui/setup-ui.log") or ""
DEFAULT_LOG_APPLICATION: str = _get_secret("SETUP_UI_DEFAULT_LOG_APPLICATION", "setup-ui") or "setup-ui"

# Ordered steps of the setup wizard, rendered as the tab bar
WIZARD_TABS: List[TabConfig] = [
    TabConfig("welcome", "Welcome", url="setup", url_params={"step": "welcome"}, icon_cls="home"),
    TabConfig("modules", "Modules", url="setup", url_params={"step": "modules"}, icon_cls="puzzle"),
    TabConfig("requirements", "Requirements", url="setup", url_params={"step": "requirements"}, icon_cls="check"),
    TabConfig("general", "Application & Logging", url="setup", url_params={"step": "general"}, icon_cls="cog"),
    TabConfig("summary", "Summary", url="setup", url_params={"step": "summary"}, icon_cls="list"),
]
