"""Process environment abstraction for testing.

Resolution needs two pieces of ambient state: environment variables
(CARGO_HOME) and the user's home directory. Both go through this ABC so tests
can supply a synthetic home without mutating the real process environment.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Environment(ABC):
    """Abstract process environment for dependency injection."""

    @abstractmethod
    def get_env(self, name: str) -> str | None:
        """Get an environment variable.

        Args:
            name: Variable name

        Returns:
            The variable's value, or None if it is not set
        """
        ...

    @abstractmethod
    def home_dir(self) -> Path | None:
        """Get the current user's home directory.

        Returns:
            Home directory path, or None if it cannot be determined
        """
        ...
