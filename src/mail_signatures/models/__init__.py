"""Signature data models.

This module exports the entities flowing through the renderer:
- OrganizationConfig: Organization profile (branding, assets, defaults)
- UserSignatureData: One person's signature fields
- TemplateData: Resolved context consumed by the templates
- LinkItem / SponsorItem: Social links and sponsor/supporter logos
- NameImage: Avatar or wide logo
- TemplateVariant: Supported layouts
"""

from mail_signatures.models.context import TemplateData
from mail_signatures.models.profile import (
    LinkItem,
    NameImage,
    OrganizationConfig,
    SponsorItem,
    TemplateVariant,
)
from mail_signatures.models.user import UserSignatureData

__all__ = [
    "OrganizationConfig",
    "UserSignatureData",
    "TemplateData",
    "LinkItem",
    "SponsorItem",
    "NameImage",
    "TemplateVariant",
]
