"""Styled terminal output for the shurl command.

Labels are coloured with click.style, which degrades to plain text on
non-colour terminals and when output is captured.
"""

import click


def _labelled(label: str, colour: str, message: str) -> str:
    return f'{click.style(label, fg=colour)} {click.style(message, bold=True)}'


def error(message: str) -> None:
    """Print an error message to stderr with a red 'Error:' label."""
    click.echo(_labelled('Error:', 'red', message), err=True)


def warning(message: str) -> None:
    """Print a warning message to stderr with a yellow 'Warning:' label."""
    click.echo(_labelled('Warning:', 'yellow', message), err=True)


def info(message: str) -> None:
    """Print an informational message with a green 'Info:' label."""
    click.echo(_labelled('Info:', 'green', message))


def plain(message: str) -> None:
    click.echo(message)
