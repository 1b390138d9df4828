"""Output helpers for user-facing CLI messages."""

import click


def user_output(message: str = "") -> None:
    """Write a message meant for the user to stderr."""
    click.echo(message, err=True)


def error_output(message: str) -> None:
    """Write a red "Error:" prefixed message to stderr."""
    user_output(click.style("Error: ", fg="red") + message)
