"""Signature template rendering.

Jinja2 layouts (original, wide-logo) rendered to email-client-safe HTML,
plus extraction of the body-only fragment used for pasting.
"""

from mail_signatures.templates.extract import extract_main_content
from mail_signatures.templates.renderer import SignatureRenderer, render_signature

__all__ = ["SignatureRenderer", "extract_main_content", "render_signature"]
