"""Command-line interface for inspecting the Antigravity User-Agent.

This module implements a small Click command that resolves the User-Agent the
same way the networking code does and prints it, either as the bare header
value or as JSON with its individual components.
"""

from __future__ import annotations

import json
import logging
import sys

import click

from antigravity_ua.config import APP_VERSION_ENV, Settings
from antigravity_ua.user_agent import build_user_agent


def _setup_logging(verbose: bool) -> None:
    """Configure global logging.

    Args:
        verbose: If *True* enable *DEBUG* level logging, otherwise only
        *WARNING* and above so the printed header stays the sole output.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    # Only the level is set; embedding applications keep control of format.
    logging.basicConfig(level=level)


def _create_settings() -> Settings:
    """Return validated :class:`~antigravity_ua.config.Settings` instance.

    Exits the program with status *1* if validation fails.
    """
    try:
        return Settings()
    except Exception as exc:
        click.echo(f"✗ Configuration error: {exc}", err=True)
        click.echo(
            f"\n  {APP_VERSION_ENV} must be a version like 1.15.8 when set", err=True
        )
        sys.exit(1)


@click.command()
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the User-Agent components as JSON",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging",
)
def main(as_json: bool, verbose: bool) -> None:
    """Print the User-Agent sent with upstream API requests."""
    _setup_logging(verbose)

    settings = _create_settings()
    user_agent = build_user_agent(settings)

    if as_json:
        payload = user_agent.model_dump(mode="json")
        payload["user_agent"] = user_agent.header_value
        click.echo(json.dumps(payload, indent=2))
    else:
        click.echo(user_agent.header_value)


if __name__ == "__main__":
    main()
