"""Test fixtures for mail-signatures.

Sample Profiles:
- profiles/delegacion.yaml: original layout with contact defaults and footer
- profiles/club.yaml: wide-logo layout with sponsors and supporters
"""

from pathlib import Path

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent

# Path to sample profiles
PROFILES_DIR = FIXTURES_DIR / "profiles"


def get_profile_path(profile_id: str) -> Path:
    """Get path to a sample profile file.

    Args:
        profile_id: Sample profile id

    Returns:
        Path to the profile YAML file

    Raises:
        ValueError: If the profile doesn't exist
    """
    path = PROFILES_DIR / f"{profile_id}.yaml"
    if not path.exists():
        raise ValueError(f"Sample profile not found: {profile_id}")
    return path
