"""Field resolution: merge a user record with an organization profile.

Every optional field follows one rule table. For a given render a field is
either in "fallback" mode (user value, else the profile's) or in
"override-only" mode (user value, else nothing), selected by the set of
enabled optional fields passed to resolve().
"""

import logging
from collections.abc import Collection
from dataclasses import dataclass
from datetime import date
from operator import attrgetter
from typing import Any

from mail_signatures.models import OrganizationConfig, TemplateData, UserSignatureData

logger = logging.getLogger(__name__)

# Placeholders keep required slots filled in previews
PLACEHOLDER_NAME = "Nombre"
PLACEHOLDER_POSITION = "Puesto"
PLACEHOLDER_MAIL = "email@ejemplo.com"
DEFAULT_FONT = "Arial"


@dataclass(frozen=True)
class FieldRule:
    """Resolution rule for one optional-overridable field.

    Attributes:
        field_id: Field identifier, also the UserSignatureData attribute
        profile_attr: Dotted OrganizationConfig attribute holding the fallback
        default: Value used when resolution yields nothing
        profile_default: Fall back to the profile value even in override-only mode
    """

    field_id: str
    profile_attr: str | None = None
    default: Any = None
    profile_default: bool = False

    def profile_value(self, profile: OrganizationConfig) -> Any:
        return attrgetter(self.profile_attr or self.field_id)(profile)

    def apply(
        self,
        user: UserSignatureData,
        profile: OrganizationConfig,
        enabled_optional_fields: Collection[str] | None,
    ) -> Any:
        """Resolve this field for one render."""
        override_only = (
            enabled_optional_fields is not None and self.field_id in enabled_optional_fields
        )
        profile_value = self.profile_value(profile)
        value = resolve_field(getattr(user, self.field_id), profile_value, override_only)

        if not value and self.profile_default:
            value = profile_value
        if not value and self.default is not None:
            value = self.default
        return value


def resolve_field(user_value: Any, profile_value: Any, override_only: bool) -> Any:
    """Pick the value for one field.

    Args:
        user_value: Value supplied by the user (may be empty)
        profile_value: Profile value for the same field
        override_only: Ignore the profile value for this render

    Returns:
        Resolved value, or None when the field is absent
    """
    if override_only:
        return user_value or None
    return user_value or profile_value or None


OPTIONAL_FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("phone"),
    FieldRule("phone_country_code"),
    FieldRule("internal_phone"),
    FieldRule("opt_mail"),
    FieldRule("organization_extra"),
    FieldRule("main_font", default=DEFAULT_FONT),
    FieldRule("name_font", default=DEFAULT_FONT),
    FieldRule("max_width"),
    # The image slot is never left empty
    FieldRule("name_image", profile_attr="name_image.image", profile_default=True),
)

OPTIONAL_FIELD_IDS: frozenset[str] = frozenset(rule.field_id for rule in OPTIONAL_FIELD_RULES)


def current_date(today: date | None = None) -> str:
    """Return the local calendar date as YYYY-MM-DD."""
    return (today or date.today()).isoformat()


def resolve(
    user: UserSignatureData,
    profile: OrganizationConfig,
    enabled_optional_fields: Collection[str] | None = None,
    today: date | None = None,
) -> TemplateData:
    """Merge a user record and a profile into a rendering context.

    Args:
        user: User-supplied signature fields
        profile: Organization profile
        enabled_optional_fields: Field ids in override-only mode for this
            render (None: fallback mode for every field)
        today: Date to stamp (defaults to the local calendar date)

    Returns:
        Fully resolved TemplateData
    """
    if enabled_optional_fields:
        unknown = set(enabled_optional_fields) - OPTIONAL_FIELD_IDS
        if unknown:
            logger.debug("Ignoring unknown optional fields: %s", sorted(unknown))

    resolved = {
        rule.field_id: rule.apply(user, profile, enabled_optional_fields)
        for rule in OPTIONAL_FIELD_RULES
    }
    logger.debug("Resolved fields for profile %s: %s", profile.id, resolved)

    return TemplateData(
        name=user.name or PLACEHOLDER_NAME,
        position=user.position or PLACEHOLDER_POSITION,
        mail=user.mail or PLACEHOLDER_MAIL,
        name_image_alt=profile.name_image.alt,
        name_image_description=profile.name_image.description,
        name_image_url=profile.name_image.url,
        color=profile.color,
        organization=profile.organization,
        date=current_date(today),
        links=list(profile.links),
        sponsors=profile.sponsors,
        supporters=profile.supporters,
        sponsor_text=profile.sponsor_text,
        supporter_text=profile.supporter_text,
        footer_address=profile.footer_address,
        footer_text=profile.footer_text,
        **resolved,
    )
