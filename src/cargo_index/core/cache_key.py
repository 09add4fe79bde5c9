"""Registry index cache directory naming.

Cargo stores each registry's index under
`<cargo home>/registry/index/<host>-<hash>`, where the hash is SipHash-2-4
(zero key) over the source kind and the index URL.
"""

from pathlib import Path

from cargo_index.core.cargo_home import cargo_home
from cargo_index.core.environment.abc import Environment
from cargo_index.core.environment.real import RealEnvironment
from cargo_index.core.registry_url import RegistryUrl
from cargo_index.core.siphash import SipHasher
from cargo_index.core.source_kind import SourceKind


def short_name(registry_url: RegistryUrl) -> str:
    """Compute Cargo's cache directory name for a registry index.

    Args:
        registry_url: Resolved index URL

    Returns:
        "{host}-{16 hex digits}", e.g. "github.com-1ecc6299db9ec823" for
        the crates.io git index

    Example:
        >>> short_name(RegistryUrl.parse("https://github.com/rust-lang/crates.io-index"))
        'github.com-1ecc6299db9ec823'
    """
    hasher = SipHasher(0, 0)
    SourceKind.REGISTRY.hash_into(hasher)
    hasher.write_str(registry_url.as_str())
    return f"{registry_url.host}-{hasher.hexdigest()}"


def registry_cache_path(registry_url: RegistryUrl, environment: Environment | None = None) -> Path:
    """Get the index cache directory Cargo uses for a registry.

    Args:
        registry_url: Resolved index URL
        environment: Environment to read CARGO_HOME from (defaults to the
            real process environment)

    Returns:
        <cargo home>/registry/index/<short name>

    Raises:
        HomeDirUnavailableError: If the cargo home cannot be determined
    """
    env = environment if environment is not None else RealEnvironment()
    return cargo_home(env) / "registry" / "index" / short_name(registry_url)
