"""Unit tests for the signature renderer."""

import re
from dataclasses import replace
from datetime import date

import pytest

from mail_signatures.models import (
    LinkItem,
    OrganizationConfig,
    TemplateData,
    TemplateVariant,
    UserSignatureData,
)
from mail_signatures.resolver import resolve
from mail_signatures.templates import SignatureRenderer, extract_main_content, render_signature


@pytest.fixture
def renderer() -> SignatureRenderer:
    """Create a renderer instance."""
    return SignatureRenderer()


@pytest.fixture
def original_data(
    user: UserSignatureData,
    original_profile: OrganizationConfig,
    fixed_date: date,
) -> TemplateData:
    """Resolved data for the original layout."""
    return resolve(user, original_profile, today=fixed_date)


@pytest.fixture
def wide_data(
    user: UserSignatureData,
    wide_profile: OrganizationConfig,
    fixed_date: date,
) -> TemplateData:
    """Resolved data for the wide-logo layout."""
    return resolve(user, wide_profile, today=fixed_date)


class TestDocumentShape:
    """Tests for the document wrapper shared by both layouts."""

    @pytest.mark.parametrize("variant", list(TemplateVariant))
    def test_starts_with_doctype(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
        variant: TemplateVariant,
    ) -> None:
        """Test that output is a complete HTML document."""
        html = renderer.render(original_data, variant)

        assert html.startswith("<!DOCTYPE html>")
        assert '<html lang="es">' in html
        assert html.rstrip().endswith("</html>")

    @pytest.mark.parametrize("variant", list(TemplateVariant))
    def test_body_has_single_top_level_div(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
        variant: TemplateVariant,
    ) -> None:
        """Test that the body content is wrapped in exactly one div."""
        body = extract_main_content(renderer.render(original_data, variant))

        assert body.startswith("<div>")
        assert body.endswith("</div>")

    def test_head_metadata(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test that head carries author, source, date and icon credits."""
        html = renderer.render(original_data, "original")

        assert '<meta name="author" content="Iván Salido Cobo" />' in html
        assert '<meta name="github" content="https://github.com/ComicIvans/mail-signatures" />' in html
        assert '<meta name="last-modified" content="2025-03-07" />' in html
        assert '<meta name="icons-source" content="https://tabler-icons.io/" />' in html

    def test_mso_conditional_block(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test that the Outlook table reset is present."""
        html = renderer.render(original_data)

        assert "<!--[if mso]>" in html
        assert "border-collapse: collapse;" in html
        assert "<![endif]-->" in html

    def test_deterministic(
        self,
        renderer: SignatureRenderer,
        wide_data: TemplateData,
    ) -> None:
        """Test that identical input renders byte-identical output."""
        assert renderer.render(wide_data, "wide-logo") == renderer.render(wide_data, "wide-logo")


class TestTemplateDispatch:
    """Tests for layout selection."""

    @pytest.mark.parametrize("template_id", ["classic", "", None, "WIDE-LOGO"])
    def test_unknown_template_uses_original(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
        template_id: str | None,
    ) -> None:
        """Test that unrecognised ids fall back to the original layout."""
        assert renderer.render(original_data, template_id) == renderer.render(original_data, "original")

    def test_string_and_enum_equivalent(
        self,
        renderer: SignatureRenderer,
        wide_data: TemplateData,
    ) -> None:
        """Test that a string id and the enum render the same."""
        assert renderer.render(wide_data, "wide-logo") == renderer.render(wide_data, TemplateVariant.WIDE_LOGO)

    def test_render_signature_uses_profile_layout(
        self,
        user: UserSignatureData,
        wide_profile: OrganizationConfig,
        fixed_date: date,
    ) -> None:
        """Test the resolve-and-render convenience function."""
        html = render_signature(user, wide_profile, today=fixed_date)

        assert "min-width: 120px; min-height: 65px" in html
        assert "Patrocinadores" in html


class TestColor:
    """Tests for brand color output."""

    def test_color_lowercased(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test that the brand color is emitted in lowercase."""
        html = renderer.render(original_data, "original")

        assert "#c8102e" in html
        assert "#C8102E" not in html

    @pytest.mark.parametrize("variant", list(TemplateVariant))
    def test_case_variants_render_identically(
        self,
        renderer: SignatureRenderer,
        wide_data: TemplateData,
        variant: TemplateVariant,
    ) -> None:
        """Test that colors differing only in case produce identical markup."""
        upper = renderer.render(replace(wide_data, color="#ABCDEF"), variant)
        lower = renderer.render(replace(wide_data, color="#abcdef"), variant)

        assert upper == lower


class TestContactLine:
    """Tests for the phone / email / optional email line."""

    def test_phone_branch(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test that phone and primary email are shown with a tel link."""
        html = renderer.render(original_data, "original")

        assert 'href="tel:+34958243000"' in html
        assert ">958 24 30 00</a>" in html
        assert 'href="mailto:ana@example.org"' in html
        assert "&nbsp;&nbsp;·&nbsp;&nbsp;" in html
        # opt_mail is only shown when there is no phone
        assert "mailto:info@example.org" not in html

    def test_internal_phone_in_parentheses(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test that the extension follows the phone number."""
        html = renderer.render(replace(original_data, internal_phone="4321"), "original")

        assert "958 24 30 00</a>&nbsp;(4321)" in html

    def test_phone_without_country_code(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test that no prefix is added when the country code is absent."""
        html = renderer.render(replace(original_data, phone_country_code=None), "original")

        assert 'href="tel:958243000"' in html

    def test_optional_mail_branch(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test that the secondary email is shown when there is no phone."""
        html = renderer.render(replace(original_data, phone=None), "original")

        assert "tel:" not in html
        assert 'href="mailto:ana@example.org"' in html
        assert 'href="mailto:info@example.org"' in html
        assert "&nbsp;&nbsp;·&nbsp;&nbsp;" in html

    def test_mail_only_branch(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test that only the primary email is shown with neither extra."""
        html = renderer.render(replace(original_data, phone=None, opt_mail=None), "original")

        assert "tel:" not in html
        assert html.count("mailto:") == 1
        assert "&nbsp;&nbsp;·&nbsp;&nbsp;" not in html


class TestOriginalLayout:
    """Tests specific to the original layout."""

    def test_round_avatar_beside_name(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test the 55px rounded avatar and the name."""
        html = renderer.render(original_data, "original")

        assert "width: 55px; height: 55px; display: block; border-radius: 50%" in html
        assert 'src="https://example.org/avatar.png"' in html
        assert "<strong>Ana López</strong>" in html

    def test_avatar_link_and_labels(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test that the avatar carries the profile's alt, label and link."""
        html = renderer.render(original_data, "original")

        assert 'alt="Delegación"' in html
        assert 'aria-label="Logo de la Delegación"' in html
        assert '<a href="https://example.org"' in html

    def test_avatar_alt_fallback(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test that a missing alt falls back to an emoji."""
        data = replace(original_data, name_image_alt=None, name_image_url=None)
        html = renderer.render(data, "original")

        assert 'alt="👤"' in html

    def test_footer_rendered(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test that the footer address and text are present."""
        html = renderer.render(original_data, "original")

        assert '<strong style="color: #c8102e">Avenida de la Universidad s/n</strong>' in html
        assert "Este mensaje es confidencial." in html

    def test_footer_omitted_when_empty(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test that no footer table is emitted without footer content."""
        html = renderer.render(replace(original_data, footer_address=None, footer_text=None), "original")

        assert "font-size: 8pt" not in html

    def test_sponsors_never_rendered(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test that the original layout ignores sponsors."""
        html = renderer.render(original_data, "original")

        assert "Patrocinado por" not in html
        assert "sponsor.example.com" not in html

    def test_organization_extra(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test the italic extra organization line."""
        html = renderer.render(original_data, "original")

        assert "<em>Universidad de Granada</em>" in html

        html = renderer.render(replace(original_data, organization_extra=None), "original")
        assert "<em>" not in html


class TestWideLogoLayout:
    """Tests specific to the wide-logo layout."""

    def test_wide_logo_image(
        self,
        renderer: SignatureRenderer,
        wide_data: TemplateData,
    ) -> None:
        """Test the wide logo sizing."""
        html = renderer.render(wide_data, "wide-logo")

        assert 'height="65" width="120" src="https://example.org/wide-logo.png"' in html

    def test_footer_never_rendered(
        self,
        renderer: SignatureRenderer,
        wide_data: TemplateData,
    ) -> None:
        """Test that the wide-logo layout ignores the footer."""
        html = renderer.render(wide_data, "wide-logo")

        assert "Not rendered in this layout" not in html

    def test_sponsor_and_supporter_headings(
        self,
        renderer: SignatureRenderer,
        wide_data: TemplateData,
    ) -> None:
        """Test that both sections render with their headings and color bars."""
        html = renderer.render(wide_data, "wide-logo")

        assert "Patrocinadores" in html
        assert "Con el apoyo de" in html
        # One bar beside the contact block plus one per heading
        assert html.count("width: 4px; background-color: #0a7d3b") == 3

    def test_sponsor_with_url_is_link(
        self,
        renderer: SignatureRenderer,
        wide_data: TemplateData,
    ) -> None:
        """Test that a sponsor with a URL is wrapped in an anchor."""
        html = renderer.render(wide_data, "wide-logo")

        assert '<a href="https://sponsor-a.example.com"' in html
        assert 'width="120" height="40" src="https://sponsor-a.example.com/logo.png"' in html
        assert "width: 120px; height: 40px" in html

    def test_sponsor_without_url_is_span(
        self,
        renderer: SignatureRenderer,
        wide_data: TemplateData,
    ) -> None:
        """Test that a sponsor without a URL is not a link."""
        html = renderer.render(wide_data, "wide-logo")

        assert re.search(r'<span style="[^"]*"><img alt="Sponsor B"', html)
        assert "<span title=" not in html
        assert "width: auto; height: auto" in html

    @pytest.mark.parametrize("empty", [None, []])
    def test_empty_sponsors_omitted(
        self,
        renderer: SignatureRenderer,
        wide_data: TemplateData,
        empty: list[LinkItem] | None,
    ) -> None:
        """Test that empty or absent lists produce no section."""
        data = replace(wide_data, sponsors=empty, supporters=empty)
        html = renderer.render(data, "wide-logo")

        assert "Patrocinadores" not in html
        assert "Con el apoyo de" not in html
        assert "margin-bottom: 5px" not in html

    def test_heading_omitted_without_text(
        self,
        renderer: SignatureRenderer,
        wide_data: TemplateData,
    ) -> None:
        """Test that logos render without a heading when no text is set."""
        html = renderer.render(replace(wide_data, sponsor_text=None, supporters=None), "wide-logo")

        assert "sponsor-a.example.com/logo.png" in html
        assert "Patrocinadores" not in html


class TestLinksAndWidth:
    """Tests for social links and the width limit."""

    def test_links_bar(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test that each social link renders as a titled icon."""
        html = renderer.render(original_data, "original")

        assert '<a href="https://instagram.com/delegacion" title="Instagram" aria-label="Instagram"' in html
        assert 'src="https://example.org/icons/instagram.png"' in html

    @pytest.mark.parametrize("variant", list(TemplateVariant))
    def test_links_bar_omitted_when_empty(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
        variant: TemplateVariant,
    ) -> None:
        """Test that no links container is emitted for an empty list."""
        html = renderer.render(replace(original_data, links=[]), variant)

        assert "border-radius: 50%; color: inherit" not in html
        assert '<div style="margin-bottom: 20px">' not in html

    @pytest.mark.parametrize("variant", list(TemplateVariant))
    def test_max_width_applied(
        self,
        renderer: SignatureRenderer,
        wide_data: TemplateData,
        variant: TemplateVariant,
    ) -> None:
        """Test that the width limit reaches the outer and inner tables."""
        html = renderer.render(replace(wide_data, max_width=420), variant)

        assert html.count("max-width: 420px") >= 2
        assert "font-size: 10pt; max-width: 420px" in html
        assert "width: fit-content; max-width: 420px" in html

    @pytest.mark.parametrize("variant", list(TemplateVariant))
    def test_no_max_width(
        self,
        renderer: SignatureRenderer,
        wide_data: TemplateData,
        variant: TemplateVariant,
    ) -> None:
        """Test that no width limit is emitted when unset."""
        html = renderer.render(replace(wide_data, max_width=None), variant)

        assert set(re.findall(r"max-width: (\d+)px", html)) <= {"35"}


class TestEscaping:
    """Tests for user text escaping."""

    def test_user_text_escaped(
        self,
        renderer: SignatureRenderer,
        original_data: TemplateData,
    ) -> None:
        """Test that markup in user fields is escaped."""
        html = renderer.render(replace(original_data, name="<b>Ana</b> & co"), "original")

        assert "&lt;b&gt;Ana&lt;/b&gt; &amp; co" in html
        assert "<b>Ana</b>" not in html
