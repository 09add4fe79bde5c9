"""Tests for registry cache directory naming."""

from pathlib import Path

import pytest
from tests.fakes.environment import FakeEnvironment

from cargo_index.core.cache_key import registry_cache_path, short_name
from cargo_index.core.errors import HomeDirUnavailableError
from cargo_index.core.registry_url import RegistryUrl
from cargo_index.core.source_kind import SourceKind

CRATES_IO = RegistryUrl.parse("https://github.com/rust-lang/crates.io-index")


def test_short_name_matches_cargo_for_crates_io() -> None:
    """The directory every Cargo installation uses for the crates.io git index."""
    assert short_name(CRATES_IO) == "github.com-1ecc6299db9ec823"


def test_short_name_is_deterministic() -> None:
    url = RegistryUrl.parse("https://my-intranet.example.com:8080/git/index")

    assert short_name(url) == short_name(RegistryUrl.parse(url.as_str()))


def test_short_name_format() -> None:
    url = RegistryUrl.parse("https://my-intranet.example.com:8080/git/index")

    host, _, digest = short_name(url).rpartition("-")

    assert host == "my-intranet.example.com"
    assert len(digest) == 16
    assert all(c in "0123456789abcdef" for c in digest)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("https://example.com/a/../index", "example.com-4b9bc5264e97aa3e"),
        ("https://example.com\\index", "example.com-4b9bc5264e97aa3e"),
        ("ssh://git@GitHub.com/org/index", "GitHub.com-915a0b1e52291687"),
        ("https://example.com/my index", "example.com-542ea8a03fb35073"),
        ("https://127.1/index", "127.0.0.1-ba66f92e9a64e6aa"),
    ],
)
def test_short_name_matches_cargo_after_url_normalization(text: str, expected: str) -> None:
    """Names computed by Cargo (url crate + SipHasher) for non-canonical inputs."""
    assert short_name(RegistryUrl.parse(text)) == expected


def test_short_name_differs_per_url() -> None:
    other = RegistryUrl.parse("https://github.com/rust-lang/crates.io-index2")

    assert short_name(other) != short_name(CRATES_IO)
    assert short_name(other).startswith("github.com-")


def test_short_name_without_host() -> None:
    url = RegistryUrl.parse("file:///srv/registry/index")

    assert short_name(url).startswith("-")
    assert len(short_name(url)) == 17


@pytest.mark.parametrize(
    ("kind", "value"),
    [
        (SourceKind.GIT, 0),
        (SourceKind.PATH, 1),
        (SourceKind.REGISTRY, 2),
        (SourceKind.LOCAL_REGISTRY, 3),
        (SourceKind.DIRECTORY, 4),
    ],
)
def test_source_kind_discriminants(kind: SourceKind, value: int) -> None:
    assert kind.value == value


def test_registry_cache_path_uses_cargo_home(tmp_path: Path) -> None:
    env = FakeEnvironment(env_vars={"CARGO_HOME": str(tmp_path / "cargo")})

    result = registry_cache_path(CRATES_IO, env)

    assert result == tmp_path / "cargo" / "registry" / "index" / "github.com-1ecc6299db9ec823"


def test_registry_cache_path_defaults_to_dot_cargo(tmp_path: Path) -> None:
    env = FakeEnvironment(home=tmp_path)

    result = registry_cache_path(CRATES_IO, env)

    assert result == tmp_path / ".cargo" / "registry" / "index" / "github.com-1ecc6299db9ec823"


def test_registry_cache_path_without_home_fails() -> None:
    with pytest.raises(HomeDirUnavailableError):
        registry_cache_path(CRATES_IO, FakeEnvironment())
