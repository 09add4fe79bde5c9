"""Errors raised while resolving a registry index location.

Every error is terminal for the resolution call that raised it. The CLI turns
them into a one-line diagnostic; library callers can catch CargoIndexError.
"""

from collections.abc import Sequence
from pathlib import Path


class CargoIndexError(Exception):
    """Base class for registry resolution failures."""


class HomeDirUnavailableError(CargoIndexError):
    """Neither CARGO_HOME nor the user's home directory could be determined."""

    def __init__(self) -> None:
        super().__init__("Unable to determine the cargo home directory (set CARGO_HOME)")


class InvalidConfigError(CargoIndexError):
    """A config file failed to parse, or the resolved source has no usable URL."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)


class RegistryNotFoundError(CargoIndexError):
    """A user-supplied registry name is not declared in any config file."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"The registry '{name}' could not be found")


class SourceNotFoundError(CargoIndexError):
    """A replace-with target is not declared in any config file."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"The source '{name}' could not be found")


class SourceCycleError(SourceNotFoundError):
    """A replace-with chain points back at a source it already visited."""

    def __init__(self, name: str, chain: Sequence[str]) -> None:
        self.chain = tuple(chain)
        path = " -> ".join([*self.chain, name])
        super().__init__(name, f"The source '{name}' replaces itself: {path}")
