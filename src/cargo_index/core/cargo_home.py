"""Cargo home directory discovery."""

import logging
from pathlib import Path

from cargo_index.core.constants import CARGO_DIR_NAME, CARGO_HOME_ENV_VAR
from cargo_index.core.environment.abc import Environment
from cargo_index.core.errors import HomeDirUnavailableError

logger = logging.getLogger(__name__)


def cargo_home(environment: Environment) -> Path:
    """Get Cargo's global state directory.

    CARGO_HOME wins when it is set to a non-empty value; otherwise this is
    ~/.cargo.

    Args:
        environment: Source of environment variables and the user home

    Returns:
        Path to the cargo home directory (not checked for existence)

    Raises:
        HomeDirUnavailableError: If CARGO_HOME is unset and the user home
            directory cannot be determined
    """
    override = environment.get_env(CARGO_HOME_ENV_VAR)
    if override:
        logger.debug("Using %s=%s", CARGO_HOME_ENV_VAR, override)
        return Path(override)

    home = environment.home_dir()
    if home is None:
        raise HomeDirUnavailableError()
    return home / CARGO_DIR_NAME
