"""Jinja2 filters used by the signature templates.

Email clients ignore stylesheets and most CSS shorthands, so every value is
emitted inline; these filters keep the formatting of those values in one
place.
"""

import re

_WHITESPACE_RE = re.compile(r"\s+")


def css_color(color: str | None) -> str:
    """Normalize a color for CSS output.

    Hex colors are case-insensitive; output is always lowercase so that
    equal colors produce byte-identical markup.

    Examples:
        >>> css_color("#ABCDEF")
        '#abcdef'
    """
    if not color:
        return ""
    return color.strip().lower()


def tel_href(phone: str | None, country_code: str | None = None) -> str:
    """Build a ``tel:`` URI from a displayed phone number.

    Args:
        phone: Phone number as displayed (may contain spaces)
        country_code: International dialing prefix (e.g., "+34")

    Returns:
        URI with the prefix prepended and whitespace removed

    Examples:
        >>> tel_href("958 24 30 00", "+34")
        'tel:+34958243000'
    """
    number = _WHITESPACE_RE.sub("", phone or "")
    prefix = _WHITESPACE_RE.sub("", country_code or "")
    return f"tel:{prefix}{number}"


def px(value: int | None, fallback: str = "auto") -> str:
    """Format a pixel length, or the fallback keyword when unset.

    Examples:
        >>> px(120)
        '120px'
        >>> px(None, "none")
        'none'
    """
    if not value:
        return fallback
    return f"{value}px"
