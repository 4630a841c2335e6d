"""Jinja2 filters for signature markup."""

from mail_signatures.renderers.filters import css_color, px, tel_href

__all__ = ["css_color", "px", "tel_href"]
