"""Entry point for running mail-signatures as a module.

Usage:
    python -m mail_signatures [command] [options]

Example:
    python -m mail_signatures generate --profile delegacion --name "Ana López" ...
    python -m mail_signatures profiles
"""

from mail_signatures.cli import app

if __name__ == "__main__":
    app()
