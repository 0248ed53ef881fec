"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
CLDR JSON keys use BCP-47 ("pt-PT"), Babel uses POSIX ("pt_PT"); both
normalize here before reaching Babel.

Python 3.11+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "split_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("zh-Hant-TW")
        'zh_Hant_TW'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("-", "_")


def split_locale(locale_code: str) -> tuple[str, str | None, str | None]:
    """Split a locale code into (language, script, region) using Babel.

    Babel canonicalizes case: language lowercase, script titlecase,
    region uppercase. Variants are not part of plural rule keys and
    are dropped.

    Raises:
        ValueError: If Babel cannot parse the identifier

    Example:
        >>> split_locale("zh-hant-tw")
        ('zh', 'Hant', 'TW')
        >>> split_locale("es-419")
        ('es', None, '419')
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel.core import parse_locale  # noqa: PLC0415

    parts = parse_locale(normalize_locale(locale_code))
    language, territory, script = parts[0], parts[1], parts[2]
    return language, script, territory


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
