"""Organization profile entities.

This module contains the organization-level configuration a signature is
rendered against:
- TemplateVariant: The two supported layouts
- LinkItem: Social link or sponsor/supporter logo
- NameImage: Avatar or wide logo shown next to the user's name
- OrganizationConfig: Branding, contact defaults and shared assets
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from mail_signatures.models.validation import is_hex_color


class TemplateVariant(Enum):
    """Signature layout."""

    ORIGINAL = "original"
    WIDE_LOGO = "wide-logo"

    @classmethod
    def from_id(cls, value: "str | TemplateVariant | None") -> "TemplateVariant":
        """Map a template identifier to a variant.

        Unrecognised identifiers fall back to ORIGINAL.

        Args:
            value: Template identifier (e.g., "wide-logo") or variant

        Returns:
            Matching TemplateVariant, ORIGINAL if unknown
        """
        if isinstance(value, TemplateVariant):
            return value
        for variant in cls:
            if variant.value == value:
                return variant
        return cls.ORIGINAL

    @property
    def template_name(self) -> str:
        """Jinja2 template file for this layout."""
        return f"{self.value}.html.j2"


@dataclass
class LinkItem:
    """Image link used for social links and sponsor/supporter logos.

    Attributes:
        image: Image URL
        url: Target URL (sponsor/supporter items may omit it)
        alt: Image alt text
        description: Tooltip and aria-label text
        width: Image width in pixels
        height: Image height in pixels
    """

    image: str
    url: str | None = None
    alt: str | None = None
    description: str | None = None
    width: int | None = None
    height: int | None = None

    def __post_init__(self) -> None:
        """Validate image dimensions."""
        for name in ("width", "height"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive. Got: {value}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LinkItem":
        """Create from a parsed YAML mapping."""
        if not data.get("image"):
            raise ValueError("Link item requires an image")
        return cls(
            image=data["image"],
            url=data.get("url") or None,
            alt=data.get("alt"),
            description=data.get("description"),
            width=data.get("width"),
            height=data.get("height"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for template context."""
        return {
            "image": self.image,
            "url": self.url,
            "alt": self.alt,
            "description": self.description,
            "width": self.width,
            "height": self.height,
        }


# Sponsors and supporters share the social link shape
SponsorItem = LinkItem


@dataclass
class NameImage:
    """Image shown beside (original) or above (wide-logo) the user's name.

    Attributes:
        image: Image URL
        alt: Alt text (templates fall back to an emoji)
        description: aria-label text
        url: Link target wrapping the image
    """

    image: str
    alt: str | None = None
    description: str | None = None
    url: str | None = None

    @classmethod
    def from_value(cls, value: str | dict[str, Any]) -> "NameImage":
        """Create from either a bare image URL or a mapping."""
        if isinstance(value, str):
            return cls(image=value)
        if not value.get("image"):
            raise ValueError("name_image requires an image")
        return cls(
            image=value["image"],
            alt=value.get("alt"),
            description=value.get("description"),
            url=value.get("url"),
        )


@dataclass
class OrganizationConfig:
    """Organization profile a signature is rendered against.

    Profiles are read-only inputs owned by configuration; rendering never
    mutates them.

    Attributes:
        id: Profile identifier (used in download filenames)
        template: Layout variant
        main_font: Body font family
        name_font: Font family for the user's name
        name_image: Avatar or wide logo
        color: Brand color (#RRGGBB)
        organization: Organization display name
        organization_extra: Extra italic line below the contact line
        phone: Default phone number
        phone_country_code: International dialing prefix (e.g., "+34")
        internal_phone: Internal extension
        opt_mail: Secondary contact address
        max_width: Maximum signature width in pixels
        links: Social links
        sponsor_text: Heading above sponsor logos
        sponsors: Sponsor logos
        supporter_text: Heading above supporter logos
        supporters: Supporter logos
        footer_address: Bold footer line
        footer_text: Muted footer paragraph
    """

    id: str
    template: TemplateVariant
    main_font: str
    name_font: str
    name_image: NameImage
    color: str
    organization: str
    organization_extra: str | None = None
    phone: str | None = None
    phone_country_code: str | None = None
    internal_phone: str | None = None
    opt_mail: str | None = None
    max_width: int | None = None
    links: list[LinkItem] = field(default_factory=list)
    sponsor_text: str | None = None
    sponsors: list[SponsorItem] | None = None
    supporter_text: str | None = None
    supporters: list[SponsorItem] | None = None
    footer_address: str | None = None
    footer_text: str | None = None

    def __post_init__(self) -> None:
        """Enforce profile invariants."""
        if not self.id or not self.id.strip():
            raise ValueError("Profile id cannot be empty")

        if not isinstance(self.template, TemplateVariant):
            valid = [v.value for v in TemplateVariant]
            if self.template not in valid:
                raise ValueError(
                    f"Invalid template '{self.template}'. Must be one of: {valid}"
                )
            self.template = TemplateVariant(self.template)

        if not is_hex_color(self.color):
            raise ValueError(f"Invalid color '{self.color}'. Expected #RRGGBB")

        if not self.organization:
            raise ValueError("Organization name cannot be empty")

        if self.max_width is not None and self.max_width <= 0:
            raise ValueError(f"max_width must be positive. Got: {self.max_width}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OrganizationConfig":
        """Create a profile from a parsed YAML mapping.

        Args:
            data: Profile mapping

        Returns:
            Validated OrganizationConfig

        Raises:
            ValueError: If a required key is missing or an invariant fails
        """
        missing = [
            key
            for key in ("id", "template", "main_font", "name_font", "name_image", "color", "organization")
            if data.get(key) in (None, "")
        ]
        if missing:
            raise ValueError(f"Missing required profile fields: {', '.join(missing)}")

        def items(key: str) -> list[LinkItem] | None:
            raw = data.get(key)
            if raw is None:
                return None
            return [LinkItem.from_dict(item) for item in raw]

        return cls(
            id=str(data["id"]),
            template=data["template"],
            main_font=data["main_font"],
            name_font=data["name_font"],
            name_image=NameImage.from_value(data["name_image"]),
            color=data["color"],
            organization=data["organization"],
            organization_extra=data.get("organization_extra"),
            phone=_optional_str(data.get("phone")),
            phone_country_code=_optional_str(data.get("phone_country_code")),
            internal_phone=_optional_str(data.get("internal_phone")),
            opt_mail=data.get("opt_mail"),
            max_width=data.get("max_width"),
            links=items("links") or [],
            sponsor_text=data.get("sponsor_text"),
            sponsors=items("sponsors"),
            supporter_text=data.get("supporter_text"),
            supporters=items("supporters"),
            footer_address=data.get("footer_address"),
            footer_text=data.get("footer_text"),
        )


def _optional_str(value: Any) -> str | None:
    # YAML reads unquoted phone numbers and extensions as ints
    if value is None:
        return None
    return str(value)
