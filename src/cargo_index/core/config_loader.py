"""Hierarchical Cargo config discovery and loading.

Cargo merges config files from every ancestor of the current package, nearest
first, followed by the file in the cargo home:

    /projects/foo/bar/.cargo/config
    /projects/foo/.cargo/config
    /projects/.cargo/config
    /.cargo/config
    $CARGO_HOME/config

See https://doc.rust-lang.org/cargo/reference/config.html#hierarchical-structure
"""

import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from cargo_index.core.config_schema import CargoConfig
from cargo_index.core.constants import CARGO_DIR_NAME, CONFIG_FILE_NAMES
from cargo_index.core.errors import InvalidConfigError
from cargo_index.core.source_table import SourceTable

logger = logging.getLogger(__name__)


def find_config_file(config_dir: Path) -> Path | None:
    """Find the config file Cargo would read in a `.cargo`-style directory.

    `config` is preferred over `config.toml` when both exist.
    """
    for file_name in CONFIG_FILE_NAMES:
        candidate = config_dir / file_name
        if candidate.is_file():
            return candidate
    return None


def config_search_dirs(manifest_path: Path, cargo_home: Path) -> list[Path]:
    """List directories that may hold a config file, in precedence order.

    Args:
        manifest_path: Path to Cargo.toml (need not exist)
        cargo_home: Cargo's global state directory

    Returns:
        `<ancestor>/.cargo` for every ancestor of the manifest's directory,
        nearest first, then the cargo home itself
    """
    start = manifest_path.absolute().parent
    dirs = [ancestor / CARGO_DIR_NAME for ancestor in [start, *start.parents]]
    dirs.append(cargo_home)
    return dirs


def discover_config_files(manifest_path: Path, cargo_home: Path) -> list[Path]:
    """Find existing config files in precedence order (highest first)."""
    found: list[Path] = []
    for config_dir in config_search_dirs(manifest_path, cargo_home):
        config_path = find_config_file(config_dir)
        if config_path is None:
            continue
        found.append(config_path)
    return found


def read_config(path: Path) -> CargoConfig:
    """Read and validate a single config file.

    Raises:
        InvalidConfigError: If the file cannot be read, is not valid TOML, or
            does not match the expected schema
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise InvalidConfigError(f"Invalid TOML in cargo config: {e}", path) from e
    except UnicodeDecodeError as e:
        raise InvalidConfigError("Cargo config is not valid UTF-8", path) from e
    except OSError as e:
        raise InvalidConfigError(f"Unable to read cargo config: {e.strerror}", path) from e

    try:
        return CargoConfig.model_validate(data)
    except ValidationError as e:
        raise InvalidConfigError(
            f"Unexpected value in cargo config: {_first_error(e)}", path
        ) from e


def load_source_table(manifest_path: Path, cargo_home: Path) -> SourceTable:
    """Merge every applicable config file into one source table."""
    table = SourceTable()
    for config_path in discover_config_files(manifest_path, cargo_home):
        logger.debug("Reading cargo config %s", config_path)
        table.merge_config(read_config(config_path))
    logger.debug("Merged %d source(s)", len(table))
    return table


def _first_error(error: ValidationError) -> str:
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}"
