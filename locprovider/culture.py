"""
Culture handling for the localization provider.

A culture is represented by a babel ``Locale``. This module turns the many
spellings of a culture ("de-DE", "de_DE", "de_DE.UTF-8") into one, derives
the resource file tags used by bundles, and detects the ambient system
culture.
"""

from __future__ import annotations

import locale
import logging
from typing import List, Optional, Union

from babel import Locale, UnknownLocaleError, default_locale

logger = logging.getLogger(__name__)

# Used when nothing can be detected from the environment
DEFAULT_CULTURE = "en_GB"

CultureLike = Union[Locale, str]


def _normalize_tag(value: str) -> str:
    """
    Normalize a raw culture string to babel's underscore form.

    Args:
        value: Raw culture string, e.g. "de-DE" or "de_DE.UTF-8@euro"

    Returns:
        str: Underscore separated identifier, e.g. "de_DE"
    """
    # Remove encoding and modifier suffixes
    value = value.strip().split(".")[0].split("@")[0]
    return value.replace("-", "_")


def parse_culture(value: CultureLike) -> Locale:
    """
    Parse a culture given as a ``Locale`` or a tag string.

    Raises:
        ValueError: if the value is empty or names no known culture.
    """
    if isinstance(value, Locale):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid culture identifier: {value!r}")

    try:
        return Locale.parse(_normalize_tag(value))
    except (UnknownLocaleError, ValueError) as e:
        raise ValueError(f"Unknown culture '{value}': {e}") from e


def culture_tag(culture: Locale) -> str:
    """Return the tag used in resource file names, e.g. "de-DE"."""
    parts = [culture.language]
    if culture.script:
        parts.append(culture.script)
    if culture.territory:
        parts.append(culture.territory)
    return "-".join(parts)


def fallback_chain(culture: Locale) -> List[str]:
    """
    Return the resource tags to search, most specific first.

    "zh-Hans-CN" -> ["zh-Hans-CN", "zh-Hans", "zh", ""]. The empty tag is the
    neutral (invariant) resource set.
    """
    chain = [culture_tag(culture)]
    if culture.territory and culture.script:
        chain.append(f"{culture.language}-{culture.script}")
    chain.append(culture.language)
    chain.append("")

    seen = set()
    ordered = []
    for tag in chain:
        if tag not in seen:
            seen.add(tag)
            ordered.append(tag)
    return ordered


def detect_system_culture() -> Locale:
    """
    Detect the ambient system culture.

    Returns:
        Locale: Detected culture, or DEFAULT_CULTURE as fallback
    """
    detected: Optional[str] = None

    # Method 1: babel looks at LANGUAGE, LC_ALL, LC_CTYPE and LANG
    try:
        detected = default_locale()
    except Exception as e:
        logger.warning(f"babel could not read the environment locale: {e}")

    # Method 2: Python locale module
    if not detected:
        try:
            detected = locale.getlocale()[0]
        except Exception as e:
            logger.warning(f"locale.getlocale() failed: {e}")

    if detected:
        try:
            return parse_culture(detected)
        except ValueError as e:
            logger.warning(f"Failed to parse system culture {detected!r}: {e}")

    return Locale.parse(DEFAULT_CULTURE)
