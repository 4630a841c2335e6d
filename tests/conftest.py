"""Shared pytest fixtures for mail-signatures tests.

Fixtures are organized by category:
- Path fixtures: Sample profile files
- Model fixtures: In-memory profiles and user records
- Configuration fixtures: Config dictionaries and project directories
- Logging fixtures: Package logger reset between tests
"""

import logging
import shutil
from collections.abc import Iterator
from datetime import date
from pathlib import Path
from typing import Any

import pytest

from mail_signatures.models import (
    LinkItem,
    NameImage,
    OrganizationConfig,
    TemplateVariant,
    UserSignatureData,
)
from tests.fixtures import PROFILES_DIR

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def profiles_dir() -> Path:
    """Return the path to the sample profiles directory."""
    return PROFILES_DIR


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def fixed_date() -> date:
    """A fixed generation date for deterministic output."""
    return date(2025, 3, 7)


@pytest.fixture
def user() -> UserSignatureData:
    """Return a complete, valid user record."""
    return UserSignatureData(
        name="Ana López",
        position="Delegada de Centro",
        mail="ana@example.org",
    )


@pytest.fixture
def original_profile() -> OrganizationConfig:
    """Return an original-layout profile with contact defaults and a footer."""
    return OrganizationConfig(
        id="delegacion",
        template=TemplateVariant.ORIGINAL,
        main_font="Verdana",
        name_font="Georgia",
        name_image=NameImage(
            image="https://example.org/avatar.png",
            alt="Delegación",
            description="Logo de la Delegación",
            url="https://example.org",
        ),
        color="#C8102E",
        organization="Delegación de Estudiantes",
        phone="958 24 30 00",
        phone_country_code="+34",
        opt_mail="info@example.org",
        organization_extra="Universidad de Granada",
        max_width=500,
        links=[
            LinkItem(
                url="https://instagram.com/delegacion",
                image="https://example.org/icons/instagram.png",
                alt="Instagram",
                description="Instagram",
            ),
        ],
        sponsor_text="Patrocinado por",
        sponsors=[LinkItem(url="https://sponsor.example.com", image="https://sponsor.example.com/logo.png")],
        footer_address="Avenida de la Universidad s/n",
        footer_text="Este mensaje es confidencial.",
    )


@pytest.fixture
def wide_profile() -> OrganizationConfig:
    """Return a wide-logo profile with sponsors and supporters."""
    return OrganizationConfig(
        id="club",
        template=TemplateVariant.WIDE_LOGO,
        main_font="Helvetica",
        name_font="Helvetica",
        name_image=NameImage(image="https://example.org/wide-logo.png"),
        color="#0A7D3B",
        organization="Club de Robótica",
        sponsor_text="Patrocinadores",
        sponsors=[
            LinkItem(
                url="https://sponsor-a.example.com",
                image="https://sponsor-a.example.com/logo.png",
                alt="Sponsor A",
                width=120,
                height=40,
            ),
            LinkItem(image="https://sponsor-b.example.com/logo.png", alt="Sponsor B"),
        ],
        supporter_text="Con el apoyo de",
        supporters=[
            LinkItem(url="https://supporter.example.com", image="https://supporter.example.com/logo.png"),
        ],
        footer_address="Not rendered in this layout",
    )


@pytest.fixture
def minimal_profile_data() -> dict[str, Any]:
    """Return the smallest valid profile mapping."""
    return {
        "id": "minimal",
        "template": "original",
        "main_font": "Arial",
        "name_font": "Arial",
        "name_image": "https://example.org/avatar.png",
        "color": "#123456",
        "organization": "Minimal Org",
    }


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def full_config() -> dict[str, Any]:
    """Return a complete configuration with all options."""
    return {
        "profiles": {
            "directory": "profiles",
            "default": "delegacion",
        },
        "output": {
            "directory": "out",
            "fragment": False,
        },
        "clipboard": {
            "command": ["xclip", "-selection", "clipboard"],
            "timeout": 5,
        },
    }


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a project directory with sample profiles and a config file."""
    shutil.copytree(PROFILES_DIR, tmp_path / "profiles")
    (tmp_path / "mail-signatures.yaml").write_text(
        "profiles:\n"
        '  directory: "profiles"\n'
        '  default: "delegacion"\n'
        "output:\n"
        '  directory: "out"\n',
        encoding="utf-8",
    )
    return tmp_path


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Restore the package logger after each test."""
    logger = logging.getLogger("mail_signatures")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
