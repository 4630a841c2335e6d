"""Organization profile loading.

Profiles are YAML files, one per organization, kept in the profiles
directory named by the configuration:

    profiles/
      delegacion.yaml
      club-robotica.yaml

Each file is validated when loaded; rendering assumes profiles are
well-formed.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from mail_signatures.models import OrganizationConfig

logger = logging.getLogger(__name__)

PROFILE_SUFFIXES = (".yaml", ".yml")


class ProfileNotFoundError(LookupError):
    """Raised when no profile with the requested id exists."""

    def __init__(self, profile_id: str, available: list[str] | None = None) -> None:
        self.profile_id = profile_id
        self.available = available or []
        message = f"Profile not found: {profile_id}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class ProfileValidationError(ValueError):
    """Raised when a profile file is malformed or violates an invariant."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Invalid profile {path}: {message}")


def load_profile_file(path: Path) -> OrganizationConfig:
    """Load and validate a single profile file.

    Args:
        path: Profile YAML file

    Returns:
        Validated OrganizationConfig

    Raises:
        ProfileValidationError: If the file cannot be parsed or is invalid
    """
    try:
        with open(path, encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ProfileValidationError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ProfileValidationError(path, "expected a mapping at the top level")

    # The file stem doubles as the id when none is given
    data.setdefault("id", path.stem)

    try:
        profile = OrganizationConfig.from_dict(data)
    except (ValueError, TypeError, AttributeError) as e:
        raise ProfileValidationError(path, str(e)) from e

    logger.debug("Loaded profile %s from %s", profile.id, path)
    return profile


class ProfileLoader:
    """Loads organization profiles from a directory.

    Profiles are parsed lazily and cached by id.

    Usage:
        loader = ProfileLoader(Path("profiles"))
        profile = loader.load("delegacion")
    """

    def __init__(self, directory: Path) -> None:
        """Initialize profile loader.

        Args:
            directory: Directory containing profile YAML files
        """
        self.directory = directory
        self._cache: dict[str, OrganizationConfig] | None = None

    def _profile_files(self) -> list[Path]:
        if not self.directory.is_dir():
            logger.warning("Profiles directory not found: %s", self.directory)
            return []
        return sorted(
            p for p in self.directory.iterdir() if p.is_file() and p.suffix in PROFILE_SUFFIXES
        )

    def load_all(self) -> dict[str, OrganizationConfig]:
        """Load every profile in the directory.

        Returns:
            Dictionary of profile id → profile

        Raises:
            ProfileValidationError: If any profile file is invalid or two
                files declare the same id
        """
        if self._cache is not None:
            return self._cache

        profiles: dict[str, OrganizationConfig] = {}
        sources: dict[str, Path] = {}
        for path in self._profile_files():
            profile = load_profile_file(path)
            if profile.id in profiles:
                raise ProfileValidationError(
                    path, f"duplicate profile id '{profile.id}' (also in {sources[profile.id]})"
                )
            profiles[profile.id] = profile
            sources[profile.id] = path

        logger.debug("Loaded %d profile(s) from %s", len(profiles), self.directory)
        self._cache = profiles
        return profiles

    def list_profiles(self) -> list[str]:
        """Return the ids of all available profiles, sorted."""
        return sorted(self.load_all())

    def load(self, profile_id: str) -> OrganizationConfig:
        """Load a profile by id.

        Args:
            profile_id: Profile identifier

        Returns:
            OrganizationConfig

        Raises:
            ProfileNotFoundError: If no profile has this id
            ProfileValidationError: If a profile file is invalid
        """
        profiles = self.load_all()
        if profile_id not in profiles:
            raise ProfileNotFoundError(profile_id, sorted(profiles))
        return profiles[profile_id]


def create_example_profile(profile_id: str = "example") -> str:
    """Create an example profile YAML with every supported key.

    Args:
        profile_id: Profile identifier

    Returns:
        YAML string with comments
    """
    return f'''# Organization profile
id: "{profile_id}"
template: "original"  # original, wide-logo

organization: "Example Organization"
# organization_extra: "Second line shown in italics"
color: "#1A73E8"
main_font: "Arial"
name_font: "Arial"

# Avatar (original) or wide logo (wide-logo)
name_image:
  image: "https://example.org/logo.png"
  alt: "Example Organization"
  # description: "Example Organization logo"
  # url: "https://example.org"

# Contact defaults (users may override them)
# phone: "958 00 00 00"
# phone_country_code: "+34"
# internal_phone: "12345"
# opt_mail: "info@example.org"
# max_width: 600

links:
  - url: "https://example.org"
    image: "https://example.org/icons/web.png"
    alt: "Web"
    description: "Website"

# Sponsors and supporters (wide-logo layout only)
# sponsor_text: "Sponsored by"
# sponsors:
#   - url: "https://sponsor.example.com"
#     image: "https://sponsor.example.com/logo.png"
#     alt: "Sponsor"
#     width: 120
# supporter_text: "With the support of"
# supporters: []

# Footer (original layout only)
# footer_address: "Example Street 1, 18071 Granada"
# footer_text: "This message is confidential."
'''
