"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from cargo_index.core.environment.abc import Environment
from cargo_index.core.environment.real import RealEnvironment


@dataclass(frozen=True)
class CargoIndexContext:
    """Immutable context holding the dependencies of a CLI invocation.

    Created at the CLI entry point. Tests build one with a fake environment
    and pass it through CliRunner.invoke(obj=...).
    """

    environment: Environment
    cwd: Path  # Current working directory at CLI invocation

    @property
    def default_manifest_path(self) -> Path:
        return self.cwd / "Cargo.toml"


def create_context() -> CargoIndexContext:
    """Create the production context from the live process environment."""
    return CargoIndexContext(environment=RealEnvironment(), cwd=Path.cwd())
