"""User-facing output routed to stderr so stdout stays machine-readable."""

import click


def user_output(message: str = "") -> None:
    """Print a human-facing message to stderr."""
    click.echo(message, err=True)
