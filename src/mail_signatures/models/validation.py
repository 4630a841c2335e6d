"""Shape checks shared by the profile invariants and user validation."""

import re

HEX_COLOR_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")

# Shape checks only, not an RFC 5322 parser
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
URL_PATTERN = re.compile(r"https?://[^\s/$.?#][^\s]*", re.IGNORECASE)


def is_hex_color(value: str | None) -> bool:
    """Return True if value is a 6-digit hex color such as ``#1A2B3C``."""
    return bool(value) and HEX_COLOR_PATTERN.fullmatch(value) is not None  # type: ignore[arg-type]


def is_email(value: str | None) -> bool:
    """Return True if value looks like an email address."""
    return bool(value) and EMAIL_PATTERN.fullmatch(value) is not None  # type: ignore[arg-type]


def is_url(value: str | None) -> bool:
    """Return True if value is an absolute http(s) URL."""
    return bool(value) and URL_PATTERN.fullmatch(value) is not None  # type: ignore[arg-type]
