"""Registry index resolution.

Resolves a registry name to its index URL by merging Cargo config files and
following source replacement, then maps the URL to Cargo's cache directory.

See https://doc.rust-lang.org/cargo/reference/source-replacement.html
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from cargo_index.core.cache_key import registry_cache_path, short_name
from cargo_index.core.cargo_home import cargo_home
from cargo_index.core.config_loader import load_source_table
from cargo_index.core.config_schema import SourceEntry
from cargo_index.core.constants import CRATES_IO_INDEX, CRATES_IO_REGISTRY
from cargo_index.core.environment.abc import Environment
from cargo_index.core.environment.real import RealEnvironment
from cargo_index.core.errors import InvalidConfigError, RegistryNotFoundError
from cargo_index.core.registry_url import InvalidRegistryUrlError, RegistryUrl

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedRegistry:
    """Everything known about a resolved registry index."""

    registry_url: RegistryUrl
    short_name: str
    cache_path: Path


def origin_name(registry_name: str | None) -> str:
    """Map a requested registry to the source name that starts the lookup.

    No name, or the crates.io index URL itself, means crates.io.
    """
    if registry_name is None or registry_name == CRATES_IO_INDEX:
        return CRATES_IO_REGISTRY
    return registry_name


def resolve_registry_url(
    manifest_path: Path,
    registry_name: str | None = None,
    environment: Environment | None = None,
) -> RegistryUrl:
    """Find the index URL Cargo would use for a registry.

    Each `.cargo` directory from the manifest's directory up to the root, then
    the cargo home, contributes at most one file: `config`, or `config.toml`
    when `config` is missing. Nearer files win.

    Args:
        manifest_path: Path to the package's Cargo.toml; config discovery
            starts from its directory
        registry_name: Name from `[registries]`, or None for crates.io
        environment: Environment to read CARGO_HOME and the user home from
            (defaults to the real process environment)

    Returns:
        The index URL at the end of the source replacement chain

    Raises:
        HomeDirUnavailableError: If the cargo home cannot be determined
        InvalidConfigError: If a config file is malformed, or the final source
            has no valid registry URL
        RegistryNotFoundError: If `registry_name` is not declared anywhere
        SourceNotFoundError: If a replace-with target is not declared
    """
    env = environment if environment is not None else RealEnvironment()
    table = load_source_table(manifest_path, cargo_home(env))

    name = origin_name(registry_name)
    entry = table.get(name)
    if entry is None:
        if name != CRATES_IO_REGISTRY:
            raise RegistryNotFoundError(name)
        logger.debug("No %s source configured, using the default index", name)
        entry = SourceEntry(registry_url=CRATES_IO_INDEX)

    source = table.follow_redirects(name, entry)
    if source.registry_url is None:
        raise InvalidConfigError(f"The source for '{name}' has no registry URL")

    try:
        url = RegistryUrl.parse(source.registry_url)
    except InvalidRegistryUrlError as e:
        raise InvalidConfigError(f"Invalid registry URL for '{name}': {e}") from e

    logger.debug("Registry %s resolved to %s", name, url)
    return url


def resolve_registry(
    manifest_path: Path,
    registry_name: str | None = None,
    environment: Environment | None = None,
) -> ResolvedRegistry:
    """Resolve a registry's index URL together with its cache location."""
    env = environment if environment is not None else RealEnvironment()
    url = resolve_registry_url(manifest_path, registry_name, env)
    return ResolvedRegistry(
        registry_url=url,
        short_name=short_name(url),
        cache_path=registry_cache_path(url, env),
    )


def registry_path(
    manifest_path: Path,
    registry_name: str | None = None,
    environment: Environment | None = None,
) -> Path:
    """Find the directory Cargo caches a registry's index in.

    Returns:
        <cargo home>/registry/index/<host>-<hash>
    """
    return resolve_registry(manifest_path, registry_name, environment).cache_path
