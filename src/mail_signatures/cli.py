"""mail-signatures CLI interface.

Commands:
- generate: Render a signature and save it as an HTML file
- copy: Render a signature and copy its body to the clipboard
- profiles: List available organization profiles
- validate: Validate a profile YAML file
- init: Initialize configuration and an example profile

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log output
- --version: Show version and exit
"""

from pathlib import Path
from typing import Annotated, Any

import typer
import yaml

from mail_signatures import __version__
from mail_signatures.config import SignatureConfig, create_default_config, load_config
from mail_signatures.models import OrganizationConfig, UserSignatureData
from mail_signatures.utils.logging import configure_from_cli, get_logger

app = typer.Typer(
    name="mail-signatures",
    help="HTML email signature generator for organizations",
    add_completion=False,
    no_args_is_help=True,
)

# Global state
_config: SignatureConfig | None = None
_logger = get_logger()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"mail-signatures {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output with timestamps"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress info messages (warnings and errors only)"),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option("--ci", help="Enable CI mode with JSON output"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """mail-signatures - HTML email signature generator.

    Merge personal details with an organization profile and render an
    email-client-safe HTML signature.
    """
    global _config

    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    try:
        _config = load_config(config_path=config)
        if _config.config_path:
            _logger.debug(f"Loaded config from: {_config.config_path}")
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except (ValueError, yaml.YAMLError) as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)


# =============================================================================
# Shared signature options
# =============================================================================

ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Profile id (defaults to profiles.default in config)"),
]
DataOpt = Annotated[
    Path | None,
    typer.Option(
        "--data",
        "-d",
        help="YAML file with user fields (options override it)",
        exists=True,
        dir_okay=False,
    ),
]
NameOpt = Annotated[str | None, typer.Option("--name", help="Full name")]
PositionOpt = Annotated[str | None, typer.Option("--position", help="Job title")]
MailOpt = Annotated[str | None, typer.Option("--mail", help="Email address")]
PhoneOpt = Annotated[str | None, typer.Option("--phone", help="Phone number")]
CountryCodeOpt = Annotated[
    str | None, typer.Option("--phone-country-code", help="Dialing prefix, e.g. +34")
]
InternalPhoneOpt = Annotated[
    str | None, typer.Option("--internal-phone", help="Internal extension")
]
OptMailOpt = Annotated[str | None, typer.Option("--opt-mail", help="Secondary email address")]
OrgExtraOpt = Annotated[
    str | None, typer.Option("--organization-extra", help="Extra italic line")
]
MainFontOpt = Annotated[str | None, typer.Option("--main-font", help="Body font family")]
NameFontOpt = Annotated[str | None, typer.Option("--name-font", help="Name font family")]
MaxWidthOpt = Annotated[
    int | None, typer.Option("--max-width", min=1, help="Maximum width in pixels")
]
NameImageOpt = Annotated[
    str | None, typer.Option("--name-image", help="Avatar/logo image URL")
]
OptionalOpt = Annotated[
    list[str] | None,
    typer.Option(
        "--optional",
        help="Field to render only from user input, never from the profile (repeatable)",
    ),
]


def _get_config() -> SignatureConfig:
    return _config if _config is not None else SignatureConfig()


def _load_profile(profile_id: str | None) -> OrganizationConfig:
    """Load the requested (or configured default) profile, exiting on error."""
    from mail_signatures.profiles import (
        ProfileLoader,
        ProfileNotFoundError,
        ProfileValidationError,
    )

    config = _get_config()
    profile_id = profile_id or config.profiles.default
    if not profile_id:
        _logger.error("No profile given. Use --profile or set profiles.default in config")
        raise typer.Exit(1)

    loader = ProfileLoader(config.profiles_dir)
    try:
        return loader.load(profile_id)
    except (ProfileNotFoundError, ProfileValidationError) as e:
        _logger.error(str(e))
        raise typer.Exit(1)


def _load_user(data_file: Path | None, overrides: dict[str, Any]) -> UserSignatureData:
    """Build the user record from a data file plus CLI options, exiting on error."""
    user = UserSignatureData()
    if data_file is not None:
        try:
            with open(data_file, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            _logger.error(f"Failed to read {data_file}: {e}")
            raise typer.Exit(1)
        if not isinstance(data, dict):
            _logger.error(f"Expected a mapping in {data_file}")
            raise typer.Exit(1)
        user = UserSignatureData.from_dict(data)

    user = user.merged_with(overrides)

    errors = user.validate()
    if errors:
        for error in errors:
            _logger.error(f"Invalid signature data: {error}")
        raise typer.Exit(1)

    return user


def _check_optional_fields(fields: list[str] | None) -> set[str] | None:
    from mail_signatures.resolver import OPTIONAL_FIELD_IDS

    if not fields:
        return None
    unknown = sorted(set(fields) - OPTIONAL_FIELD_IDS)
    if unknown:
        _logger.error(
            f"Unknown optional field(s): {', '.join(unknown)}. "
            f"Valid: {', '.join(sorted(OPTIONAL_FIELD_IDS))}"
        )
        raise typer.Exit(1)
    return set(fields)


def _render(
    profile: OrganizationConfig,
    user: UserSignatureData,
    optional: set[str] | None,
) -> str:
    from mail_signatures.templates import render_signature

    try:
        return render_signature(user, profile, optional)
    except ValueError as e:
        _logger.error(f"Rendering failed: {e}")
        raise typer.Exit(1)


# =============================================================================
# generate command
# =============================================================================


@app.command()
def generate(
    profile: ProfileOpt = None,
    data: DataOpt = None,
    name: NameOpt = None,
    position: PositionOpt = None,
    mail: MailOpt = None,
    phone: PhoneOpt = None,
    phone_country_code: CountryCodeOpt = None,
    internal_phone: InternalPhoneOpt = None,
    opt_mail: OptMailOpt = None,
    organization_extra: OrgExtraOpt = None,
    main_font: MainFontOpt = None,
    name_font: NameFontOpt = None,
    max_width: MaxWidthOpt = None,
    name_image: NameImageOpt = None,
    optional: OptionalOpt = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file (default: firma-<profile>-<name>.html in the output directory)",
        ),
    ] = None,
    fragment: Annotated[
        bool | None,
        typer.Option(
            "--fragment/--document",
            help="Write only the <body> content (overrides config)",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Print the HTML instead of writing a file"),
    ] = False,
) -> None:
    """Render a signature and save it as an HTML file.

    Exit codes:
        0: Signature generated
        1: Invalid input, unknown profile or write failure
    """
    from mail_signatures.delivery import download_filename, save_signature
    from mail_signatures.templates import extract_main_content

    config = _get_config()
    enabled_optional = _check_optional_fields(optional)
    org = _load_profile(profile)
    user = _load_user(
        data,
        {
            "name": name,
            "position": position,
            "mail": mail,
            "phone": phone,
            "phone_country_code": phone_country_code,
            "internal_phone": internal_phone,
            "opt_mail": opt_mail,
            "organization_extra": organization_extra,
            "main_font": main_font,
            "name_font": name_font,
            "max_width": max_width,
            "name_image": name_image,
        },
    )

    _logger.info(f"Rendering {org.template.value} signature for {user.name} ({org.id})")
    html = _render(org, user, enabled_optional)

    write_fragment = config.output.fragment if fragment is None else fragment
    content = extract_main_content(html) if write_fragment else html

    if dry_run:
        typer.echo(content)
        _logger.info("Dry run complete - no files written")
        raise typer.Exit(0)

    if output is not None:
        output_path = output
    else:
        output_path = config.output_dir / download_filename(org.id, user.name, user.output)

    if not save_signature(content, output_path):
        raise typer.Exit(1)

    typer.echo(f"\n📄 Signature written to: {output_path}")
    raise typer.Exit(0)


# =============================================================================
# copy command
# =============================================================================


@app.command()
def copy(
    profile: ProfileOpt = None,
    data: DataOpt = None,
    name: NameOpt = None,
    position: PositionOpt = None,
    mail: MailOpt = None,
    phone: PhoneOpt = None,
    phone_country_code: CountryCodeOpt = None,
    internal_phone: InternalPhoneOpt = None,
    opt_mail: OptMailOpt = None,
    organization_extra: OrgExtraOpt = None,
    main_font: MainFontOpt = None,
    name_font: NameFontOpt = None,
    max_width: MaxWidthOpt = None,
    name_image: NameImageOpt = None,
    optional: OptionalOpt = None,
) -> None:
    """Render a signature and copy it to the clipboard.

    Only the signature itself (the document body) is copied, ready to paste
    into an email client's signature settings.

    Exit codes:
        0: Copied
        1: Invalid input, unknown profile or clipboard failure
    """
    from mail_signatures.delivery import copy_to_clipboard

    config = _get_config()
    enabled_optional = _check_optional_fields(optional)
    org = _load_profile(profile)
    user = _load_user(
        data,
        {
            "name": name,
            "position": position,
            "mail": mail,
            "phone": phone,
            "phone_country_code": phone_country_code,
            "internal_phone": internal_phone,
            "opt_mail": opt_mail,
            "organization_extra": organization_extra,
            "main_font": main_font,
            "name_font": name_font,
            "max_width": max_width,
            "name_image": name_image,
        },
    )

    html = _render(org, user, enabled_optional)

    if not copy_to_clipboard(html, config.clipboard.command, config.clipboard.timeout):
        raise typer.Exit(1)

    typer.echo("✅ Signature copied to clipboard")
    raise typer.Exit(0)


# =============================================================================
# profiles command
# =============================================================================


@app.command()
def profiles() -> None:
    """List available organization profiles."""
    from mail_signatures.profiles import ProfileLoader, ProfileValidationError

    config = _get_config()
    loader = ProfileLoader(config.profiles_dir)

    try:
        available = loader.load_all()
    except ProfileValidationError as e:
        _logger.error(str(e))
        raise typer.Exit(1)

    if not available:
        typer.echo(f"No profiles found in {config.profiles_dir}")
        raise typer.Exit(0)

    default = config.profiles.default
    typer.echo(f"\nProfiles in {config.profiles_dir}:\n")
    for profile_id in sorted(available):
        org = available[profile_id]
        marker = " (default)" if profile_id == default else ""
        typer.echo(f"  • {profile_id}{marker} - {org.organization} [{org.template.value}]")
    typer.echo()


# =============================================================================
# validate command
# =============================================================================


@app.command()
def validate(
    profile_file: Annotated[
        Path,
        typer.Argument(
            help="Path to profile YAML file to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
) -> None:
    """Validate an organization profile file.

    Checks YAML syntax, required fields, color format and template name.
    """
    from mail_signatures.profiles import ProfileValidationError, load_profile_file

    _logger.info(f"Validating profile: {profile_file}")

    try:
        org = load_profile_file(profile_file)
    except ProfileValidationError as e:
        _logger.error(str(e))
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)

    typer.echo(f"✅ Profile is valid: {org.id} ({org.organization}, {org.template.value})")
    raise typer.Exit(0)


# =============================================================================
# init command
# =============================================================================


@app.command()
def init(
    profile_id: Annotated[
        str,
        typer.Option("--profile-id", help="Id of the example profile to create"),
    ] = "example",
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite existing files"),
    ] = False,
) -> None:
    """Initialize configuration and an example profile.

    Creates .mail-signatures/config.yaml and profiles/<id>.yaml in the
    current directory.
    """
    from mail_signatures.profiles import create_example_profile

    config_dir = Path(".mail-signatures")
    config_file = config_dir / "config.yaml"
    profiles_dir = Path("profiles")
    profile_file = profiles_dir / f"{profile_id}.yaml"

    if config_file.exists() and not force:
        _logger.error(f"Config already exists: {config_file}")
        _logger.info("Use --force to overwrite")
        raise typer.Exit(1)

    config_dir.mkdir(exist_ok=True)
    config_file.write_text(create_default_config(default_profile=profile_id), encoding="utf-8")
    _logger.info(f"Created config: {config_file}")

    profiles_dir.mkdir(exist_ok=True)
    if force or not profile_file.exists():
        profile_file.write_text(create_example_profile(profile_id), encoding="utf-8")
        _logger.info(f"Created example profile: {profile_file}")

    typer.echo("\n✅ mail-signatures initialized")
    typer.echo(f"   Config: {config_file}")
    typer.echo(f"   Profiles: {profiles_dir}/")
    raise typer.Exit(0)


if __name__ == "__main__":
    app()
