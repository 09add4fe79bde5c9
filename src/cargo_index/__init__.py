"""Locate a Cargo registry's index cache the same way Cargo does."""

from cargo_index.core.cache_key import registry_cache_path, short_name
from cargo_index.core.cargo_home import cargo_home
from cargo_index.core.config_schema import CargoConfig, SourceEntry
from cargo_index.core.constants import CRATES_IO_INDEX, CRATES_IO_REGISTRY
from cargo_index.core.environment import Environment, RealEnvironment
from cargo_index.core.errors import (
    CargoIndexError,
    HomeDirUnavailableError,
    InvalidConfigError,
    RegistryNotFoundError,
    SourceCycleError,
    SourceNotFoundError,
)
from cargo_index.core.registry_url import InvalidRegistryUrlError, RegistryUrl
from cargo_index.core.resolver import (
    ResolvedRegistry,
    registry_path,
    resolve_registry,
    resolve_registry_url,
)
from cargo_index.core.siphash import SipHasher, siphash24
from cargo_index.core.source_kind import SourceKind
from cargo_index.core.source_table import SourceTable

__version__ = "0.1.0"

__all__ = [
    # Resolution
    "resolve_registry_url",
    "resolve_registry",
    "registry_path",
    "ResolvedRegistry",
    # Cache naming
    "short_name",
    "registry_cache_path",
    "cargo_home",
    "SipHasher",
    "siphash24",
    "SourceKind",
    # Config model
    "CargoConfig",
    "SourceEntry",
    "SourceTable",
    "RegistryUrl",
    # Environment
    "Environment",
    "RealEnvironment",
    # Constants
    "CRATES_IO_INDEX",
    "CRATES_IO_REGISTRY",
    # Errors
    "CargoIndexError",
    "HomeDirUnavailableError",
    "InvalidConfigError",
    "InvalidRegistryUrlError",
    "RegistryNotFoundError",
    "SourceCycleError",
    "SourceNotFoundError",
]
