"""
Bootstrap environment for Streamlit Cloud & local dev:
- Flatten st.secrets into uppercase os.environ keys (nested -> PREFIX_CHILD)
- Load .env (without overriding existing env vars)
- Configure the root logger from SETUP_UI_LOG_LEVEL
"""

from __future__ import annotations

import logging
import os
import re
from typing import Iterator, Tuple

import streamlit as st
from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def _sanitize_key(key: str) -> str:
    # Uppercase and replace non-alphanumeric with underscores
    return re.sub(r"[^A-Za-z0-9_]", "_", key.upper())


def _flatten_secrets(prefix: str, val) -> Iterator[Tuple[str, str]]:
    if isinstance(val, dict):
        for k, v in val.items():
            yield from _flatten_secrets(f"{prefix}_{k}", v)
    else:
        yield _sanitize_key(prefix), str(val)


def _bridge_secrets_to_env() -> None:
    try:
        # st.secrets may not exist locally outside Streamlit runtime
        items = getattr(st, "secrets", None)
        if not items:
            return
        try:
            secrets_dict = items.to_dict()  # type: ignore[attr-defined]
        except AttributeError:
            secrets_dict = dict(items)

        for key, value in secrets_dict.items():
            for flat_k, flat_v in _flatten_secrets(key, value):
                os.environ.setdefault(flat_k, flat_v)
    except Exception:
        # Ignore in non-Streamlit or if secrets unavailable
        return


def configure_logging(level_name: str | None = None) -> int:
    """Apply a basic logging setup and return the numeric level in effect."""
    name = (level_name or os.getenv("SETUP_UI_LOG_LEVEL") or "INFO").upper()
    level = logging.getLevelName(name)
    known = isinstance(level, int)
    if not known:
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    if not known:
        logger.warning("Unknown log level %r, falling back to INFO", name)
    return level


def ensure_env() -> None:
    """Idempotent: make sure env vars and logging are set up.
    Safe to call multiple times, both inside and outside Streamlit runtime.
    """
    _bridge_secrets_to_env()
    # load_dotenv will not override existing env vars by default
    load_dotenv()
    configure_logging()

# Execute on import for Streamlit main process, but also allow explicit calls elsewhere.
ensure_env()
