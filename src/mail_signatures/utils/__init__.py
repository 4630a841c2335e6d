"""Utility modules.

- logging: Standardized logging with human/verbose/JSON modes and notifications
"""

from mail_signatures.utils.logging import get_logger, notify, setup_logging

__all__ = [
    "get_logger",
    "notify",
    "setup_logging",
]
