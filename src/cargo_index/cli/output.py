"""Output routing for CLI commands.

Machine-readable results go to stdout; diagnostics go to stderr so they never
end up in a captured path.
"""

import click


def user_output(message: str) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    """Write a result to stdout."""
    click.echo(message)
