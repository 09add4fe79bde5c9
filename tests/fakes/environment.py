"""Fake Environment implementation for testing.

FakeEnvironment serves environment variables and the home directory from
constructor arguments, so tests never depend on the real HOME or CARGO_HOME.
"""

from pathlib import Path

from cargo_index.core.environment.abc import Environment


class FakeEnvironment(Environment):
    """In-memory fake environment.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        env_vars: dict[str, str] | None = None,
        home: Path | None = None,
    ) -> None:
        """Create FakeEnvironment.

        Args:
            env_vars: Environment variables visible to the code under test
            home: User home directory (None = home cannot be determined)
        """
        self._env_vars = dict(env_vars) if env_vars is not None else {}
        self._home = home

    def get_env(self, name: str) -> str | None:
        return self._env_vars.get(name)

    def home_dir(self) -> Path | None:
        return self._home
