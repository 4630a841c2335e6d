"""Configuration system.

Configuration is YAML-based with per-run CLI overrides (--profile, --output).
Supports environment variable substitution (${VAR}) in config files.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.mail-signatures/config.yaml
3. ./mail-signatures.yaml
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class OutputConfig:
    """Output configuration.

    Attributes:
        directory: Directory generated files are written to
        fragment: Write the body-only fragment instead of the full document
    """

    directory: str = "."
    fragment: bool = False


@dataclass
class ProfilesConfig:
    """Where organization profiles live.

    Attributes:
        directory: Directory of profile YAML files (one profile per file)
        default: Profile id used when --profile is not given
    """

    directory: str = "profiles"
    default: str | None = None


@dataclass
class ClipboardConfig:
    """Clipboard integration.

    Attributes:
        command: Explicit clipboard command (e.g., ["xclip", "-selection", "clipboard"])
        timeout: Timeout for the clipboard command in seconds
    """

    command: list[str] | None = None
    timeout: int = 10

    def __post_init__(self) -> None:
        """Validate clipboard configuration."""
        if isinstance(self.command, str):
            self.command = self.command.split()
        if self.command is not None and not self.command:
            raise ValueError("Clipboard command cannot be empty")
        if self.timeout <= 0:
            raise ValueError(f"Clipboard timeout must be positive (got {self.timeout})")


@dataclass
class SignatureConfig:
    """Top-level configuration.

    Attributes:
        output: Output directory and format
        profiles: Profile location and default
        clipboard: Clipboard command settings
    """

    output: OutputConfig = field(default_factory=OutputConfig)
    profiles: ProfilesConfig = field(default_factory=ProfilesConfig)
    clipboard: ClipboardConfig = field(default_factory=ClipboardConfig)

    # Set when loaded from a file
    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path

    @property
    def profiles_dir(self) -> Path:
        """Profiles directory, relative to the config file when one was loaded."""
        return self._resolve_dir(self.profiles.directory)

    @property
    def output_dir(self) -> Path:
        """Output directory, relative to the config file when one was loaded."""
        return self._resolve_dir(self.output.directory)

    def _resolve_dir(self, value: str) -> Path:
        directory = Path(value)
        if directory.is_absolute() or self._config_path is None:
            return directory
        # .mail-signatures/config.yaml paths are relative to the project root
        base = self._config_path.parent
        if base.name == ".mail-signatures":
            base = base.parent
        return base / directory


# =============================================================================
# Environment Variable Substitution
# =============================================================================


def substitute_env_vars(value: Any) -> Any:
    """Substitute environment variables in config values.

    Supports ${VAR} syntax for environment variable substitution.
    Example: ${SIGNATURE_PROFILES} -> value of SIGNATURE_PROFILES

    Args:
        value: Config value (string, dict, list, or other)

    Returns:
        Value with environment variables substituted

    Raises:
        ValueError: If a referenced variable is not set
    """
    if isinstance(value, str):
        pattern = re.compile(r"\$\{([^}]+)\}")

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ValueError(f"Environment variable not set: {var_name}")
            return env_value

        return pattern.sub(replace_var, value)

    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]

    return value


# =============================================================================
# Config File Discovery
# =============================================================================


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find configuration file in standard locations.

    Search order:
    1. ./.mail-signatures/config.yaml
    2. ./mail-signatures.yaml

    Args:
        start_path: Starting directory for search (defaults to cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    start_path = start_path.resolve()

    candidates = [
        start_path / ".mail-signatures" / "config.yaml",
        start_path / "mail-signatures.yaml",
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return None


# =============================================================================
# Config Loading
# =============================================================================


def load_config_from_dict(data: dict[str, Any]) -> SignatureConfig:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        SignatureConfig instance
    """
    data = substitute_env_vars(data)

    config = SignatureConfig()

    if "output" in data:
        output_data = data["output"] or {}
        config.output = OutputConfig(
            directory=str(output_data.get("directory", config.output.directory)),
            fragment=bool(output_data.get("fragment", config.output.fragment)),
        )

    if "profiles" in data:
        profiles_data = data["profiles"] or {}
        config.profiles = ProfilesConfig(
            directory=str(profiles_data.get("directory", config.profiles.directory)),
            default=profiles_data.get("default"),
        )

    if "clipboard" in data:
        clipboard_data = data["clipboard"] or {}
        timeout = clipboard_data.get("timeout", 10)
        try:
            timeout = int(timeout)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Clipboard timeout must be an integer (got {timeout!r})") from e
        config.clipboard = ClipboardConfig(
            command=clipboard_data.get("command"),
            timeout=timeout,
        )

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> SignatureConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        SignatureConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is not None:
        with open(found_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config = load_config_from_dict(data)
        config._config_path = found_path
    else:
        config = SignatureConfig()

    return config


def create_default_config(default_profile: str | None = None) -> str:
    """Create default configuration YAML content.

    Args:
        default_profile: Profile id to preselect

    Returns:
        YAML string with default configuration and comments
    """
    default_line = (
        f'  default: "{default_profile}"'
        if default_profile
        else '  # default: "my-organization"'
    )
    return f'''# mail-signatures configuration

# Organization profiles (one YAML file per profile)
profiles:
  directory: "profiles"
{default_line}

# Output settings
output:
  directory: "."
  fragment: false  # true: write only the <body> content

# Clipboard integration (auto-detected when command is omitted)
clipboard:
  # command: ["xclip", "-selection", "clipboard"]
  timeout: 10
'''
