"""Resolved rendering context.

TemplateData is the flattened union of a user record and a profile, built
fresh for every render call by mail_signatures.resolver.
"""

from dataclasses import dataclass, field
from typing import Any

from mail_signatures.models.profile import LinkItem, SponsorItem


@dataclass(frozen=True)
class TemplateData:
    """Fully resolved input to HTML generation.

    Attributes:
        name: Display name (placeholder if empty)
        position: Job title (placeholder if empty)
        mail: Contact address (placeholder if empty)
        phone: Phone number as displayed
        phone_country_code: International dialing prefix
        internal_phone: Internal extension
        opt_mail: Secondary contact address
        organization_extra: Extra italic line
        name_image: Avatar/logo image URL
        name_image_alt: Avatar alt text (profile)
        name_image_description: Avatar aria-label (profile)
        name_image_url: Link wrapping the avatar (profile)
        main_font: Body font family
        name_font: Name font family
        color: Brand color as configured
        organization: Organization display name
        max_width: Maximum width in pixels
        date: Generation date (YYYY-MM-DD, local calendar)
        links: Social links
        sponsors: Sponsor logos
        supporters: Supporter logos
        sponsor_text: Sponsor heading
        supporter_text: Supporter heading
        footer_address: Bold footer line
        footer_text: Muted footer paragraph
    """

    name: str
    position: str
    mail: str
    name_image: str
    main_font: str
    name_font: str
    color: str
    organization: str
    date: str
    phone: str | None = None
    phone_country_code: str | None = None
    internal_phone: str | None = None
    opt_mail: str | None = None
    organization_extra: str | None = None
    name_image_alt: str | None = None
    name_image_description: str | None = None
    name_image_url: str | None = None
    max_width: int | None = None
    links: list[LinkItem] = field(default_factory=list)
    sponsors: list[SponsorItem] | None = None
    supporters: list[SponsorItem] | None = None
    sponsor_text: str | None = None
    supporter_text: str | None = None
    footer_address: str | None = None
    footer_text: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a template-friendly dictionary."""
        return {
            "name": self.name,
            "position": self.position,
            "mail": self.mail,
            "phone": self.phone,
            "phone_country_code": self.phone_country_code,
            "internal_phone": self.internal_phone,
            "opt_mail": self.opt_mail,
            "organization_extra": self.organization_extra,
            "name_image": self.name_image,
            "name_image_alt": self.name_image_alt,
            "name_image_description": self.name_image_description,
            "name_image_url": self.name_image_url,
            "main_font": self.main_font,
            "name_font": self.name_font,
            "color": self.color,
            "organization": self.organization,
            "max_width": self.max_width,
            "date": self.date,
            "links": [link.to_dict() for link in self.links],
            "sponsors": [item.to_dict() for item in self.sponsors or []],
            "supporters": [item.to_dict() for item in self.supporters or []],
            "sponsor_text": self.sponsor_text,
            "supporter_text": self.supporter_text,
            "footer_address": self.footer_address,
            "footer_text": self.footer_text,
        }
