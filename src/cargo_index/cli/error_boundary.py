"""Error boundary handling for CLI commands.

Resolution failures are expected conditions (a typo in a registry name, a
broken config file), so they are shown as a single styled line instead of a
stack trace.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from cargo_index.cli.output import user_output
from cargo_index.core.errors import CargoIndexError

F = TypeVar("F", bound=Callable[..., Any])


def cli_error_boundary(func: F) -> F:
    """Decorator that turns CargoIndexError into a clean error message.

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except CargoIndexError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
