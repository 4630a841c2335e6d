"""Signature renderer.

Renders a resolved TemplateData to a standalone HTML document using the
Jinja2 layouts shipped in this package. Output depends only on the input
data (the generation date is already part of it), so identical input
always produces byte-identical HTML.
"""

import logging
from collections.abc import Collection
from datetime import date
from typing import Any

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from mail_signatures.models import (
    OrganizationConfig,
    TemplateData,
    TemplateVariant,
    UserSignatureData,
)
from mail_signatures.renderers.filters import css_color, px, tel_href
from mail_signatures.resolver import resolve

logger = logging.getLogger(__name__)

# Fixed document metadata emitted in every <head>
DOCUMENT_META: dict[str, str] = {
    "author": "Iván Salido Cobo",
    "source": "https://github.com/ComicIvans/mail-signatures",
    "icons_source": "https://tabler-icons.io/",
}


class SignatureRenderer:
    """Renders signature documents from resolved data.

    Usage:
        renderer = SignatureRenderer()
        html = renderer.render(template_data, profile.template)
    """

    def __init__(self) -> None:
        """Initialize the Jinja2 environment with the packaged layouts."""
        self._env = Environment(
            loader=PackageLoader("mail_signatures", "templates"),
            autoescape=select_autoescape(["html", "xml", "html.j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        self._env.filters["css_color"] = css_color
        self._env.filters["tel_href"] = tel_href
        self._env.filters["px"] = px

    def render(
        self,
        data: TemplateData,
        template_id: str | TemplateVariant | None = None,
    ) -> str:
        """Render a signature document.

        Args:
            data: Resolved template data
            template_id: Layout identifier; unknown values use "original"

        Returns:
            Complete HTML document

        Raises:
            ValueError: If the layout cannot be loaded or rendered
        """
        variant = TemplateVariant.from_id(template_id)
        if variant.value != template_id and not isinstance(template_id, TemplateVariant):
            logger.debug("Unknown template %r, using %s", template_id, variant.value)

        try:
            template = self._env.get_template(variant.template_name)
        except TemplateError as e:
            logger.error("Failed to load template %s: %s", variant.template_name, e)
            raise ValueError(f"Template not found: {variant.template_name}") from e

        context = self._build_context(data)

        try:
            rendered = template.render(**context)
        except TemplateError as e:
            logger.error("Template rendering failed: %s", e)
            raise ValueError(f"Template rendering failed: {e}") from e

        logger.debug("Rendered %s signature (%d characters)", variant.value, len(rendered))
        return rendered

    def _build_context(self, data: TemplateData) -> dict[str, Any]:
        """Build the template rendering context.

        Args:
            data: Resolved template data

        Returns:
            Template context dictionary
        """
        context = data.to_dict()
        context["meta"] = DOCUMENT_META
        return context


def render_signature(
    user: UserSignatureData,
    profile: OrganizationConfig,
    enabled_optional_fields: Collection[str] | None = None,
    renderer: SignatureRenderer | None = None,
    today: date | None = None,
) -> str:
    """Resolve a user against a profile and render the profile's layout.

    Args:
        user: User signature fields
        profile: Organization profile
        enabled_optional_fields: Field ids in override-only mode
        renderer: Renderer to reuse (a new one is created if omitted)
        today: Date to stamp (defaults to the local calendar date)

    Returns:
        Complete HTML document
    """
    data = resolve(user, profile, enabled_optional_fields, today=today)
    return (renderer or SignatureRenderer()).render(data, profile.template)
