"""Delivering rendered signatures: file download and clipboard copy.

Both operations depend on the host (file system permissions, an installed
clipboard tool). Failures are reported as notifications and a False return
value; they never propagate to the caller.
"""

import logging
import re
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from mail_signatures.templates.extract import extract_main_content
from mail_signatures.utils.logging import notify

logger = logging.getLogger(__name__)

# Tried in order when no clipboard command is configured
CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)

_WHITESPACE_RE = re.compile(r"\s+")


class ClipboardUnavailableError(Exception):
    """Raised when no clipboard tool is installed."""

    def __init__(self, message: str | None = None) -> None:
        self.message = message or "No clipboard tool found (tried: " + ", ".join(
            cmd[0] for cmd in CLIPBOARD_COMMANDS
        ) + ")"
        super().__init__(self.message)


class ClipboardError(Exception):
    """Raised when the clipboard tool fails."""

    def __init__(
        self,
        command: str,
        message: str,
        exit_code: int | None = None,
    ) -> None:
        self.command = command
        self.exit_code = exit_code
        full_message = f"Clipboard command failed: {command} - {message}"
        if exit_code is not None:
            full_message += f" (exit code: {exit_code})"
        super().__init__(full_message)


def slugify(value: str) -> str:
    """Replace whitespace runs with hyphens and lower-case.

    Examples:
        >>> slugify("Ana  María López")
        'ana-maría-lópez'
    """
    return _WHITESPACE_RE.sub("-", value).lower()


def download_filename(
    profile_id: str,
    user_name: str,
    output_name: str | None = None,
) -> str:
    """Name of the downloaded signature file.

    Args:
        profile_id: Profile identifier
        user_name: User's display name
        output_name: Explicit filename, used as-is when given

    Returns:
        Filename such as ``firma-delegacion-ana-lopez.html``
    """
    if output_name:
        return output_name
    return f"firma-{profile_id}-{slugify(user_name)}.html"


def save_signature(html: str, output_path: Path) -> bool:
    """Write a signature document to disk.

    Args:
        html: Document to write
        output_path: Destination file

    Returns:
        True if written, False if the write failed
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
    except OSError as e:
        logger.debug("Write to %s failed", output_path, exc_info=True)
        notify("Error", f"Could not write {output_path}: {e.strerror or e}", success=False)
        return False

    notify("Download complete", f"Signature saved to {output_path}.")
    return True


def find_clipboard_command() -> list[str]:
    """Return the first clipboard command available in PATH.

    Raises:
        ClipboardUnavailableError: If none is installed
    """
    for command in CLIPBOARD_COMMANDS:
        if shutil.which(command[0]) is not None:
            return list(command)
    raise ClipboardUnavailableError()


def write_clipboard(text: str, command: Sequence[str] | None = None, timeout: int = 10) -> None:
    """Pipe text into a clipboard command.

    Args:
        text: Text to copy
        command: Clipboard command (auto-detected if omitted)
        timeout: Timeout in seconds

    Raises:
        ClipboardUnavailableError: If no clipboard tool is available
        ClipboardError: If the tool fails or times out
    """
    args = list(command) if command else find_clipboard_command()
    name = args[0]

    try:
        logger.debug("Copying %d characters with %s", len(text), name)
        result = subprocess.run(
            args,
            input=text,
            capture_output=True,
            text=True,
            encoding="utf-8",
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise ClipboardUnavailableError(f"Clipboard command not found: {name}") from e
    except subprocess.TimeoutExpired as e:
        raise ClipboardError(name, f"timed out after {timeout}s") from e
    except OSError as e:
        raise ClipboardError(name, str(e)) from e

    if result.returncode != 0:
        raise ClipboardError(name, result.stderr.strip() or "non-zero exit", result.returncode)


def copy_to_clipboard(
    html: str,
    command: Sequence[str] | None = None,
    timeout: int = 10,
) -> bool:
    """Copy the signature fragment of a document to the clipboard.

    Only the body content is copied so that pasting into a composer does
    not carry the document wrappers.

    Args:
        html: Full signature document
        command: Clipboard command (auto-detected if omitted)
        timeout: Timeout in seconds

    Returns:
        True if copied, False otherwise
    """
    fragment = extract_main_content(html)

    try:
        write_clipboard(fragment, command, timeout)
    except (ClipboardUnavailableError, ClipboardError) as e:
        logger.debug("Clipboard copy failed", exc_info=True)
        notify("Error", f"Could not copy to the clipboard. {e}", success=False)
        return False

    notify("HTML copied", "The signature HTML has been copied to the clipboard.")
    return True
