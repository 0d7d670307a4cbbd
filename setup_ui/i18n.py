"""
Message lookup for module-scoped translation domains.
"""

from __future__ import annotations

import gettext
from functools import lru_cache

from setup_ui import config


@lru_cache(maxsize=None)
def _translations(domain: str, localedir: str) -> gettext.NullTranslations:
    return gettext.translation(domain, localedir=localedir or None, fallback=True)


def mt(domain: str, message: str) -> str:
    """Translate `message` within the given module domain.

    Falls back to the untranslated message when no catalog is installed.
    """
    return _translations(domain, config.LOCALE_DIR).gettext(message)
