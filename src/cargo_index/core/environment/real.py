"""Real environment implementation backed by os.environ and Path.home()."""

import os
from pathlib import Path

from cargo_index.core.environment.abc import Environment


class RealEnvironment(Environment):
    """Production implementation reading the live process environment."""

    def get_env(self, name: str) -> str | None:
        return os.environ.get(name)

    def home_dir(self) -> Path | None:
        """Get the home directory using Path.home().

        Returns:
            Home directory, or None when neither HOME nor the password
            database yields one
        """
        try:
            return Path.home()
        except RuntimeError:
            return None
