"""Schema for the parts of a Cargo config file that affect registry lookup.

Only two sections matter here:

    [registries.my-registry]
    index = "https://my-intranet:8080/git/index"

    [source.crates-io]
    replace-with = "vendored-mirror"

    [source.vendored-mirror]
    registry = "https://mirror.example.com/index"

Every other section (build, net, target, ...) is ignored.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class RegistryDeclaration(BaseModel):
    """One `[registries.<name>]` table."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    index: str | None = None


class SourceDeclaration(BaseModel):
    """One `[source.<name>]` table."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    registry: str | None = None
    replace_with: str | None = Field(default=None, alias="replace-with")


class CargoConfig(BaseModel):
    """A single parsed `.cargo/config` file."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    registries: dict[str, RegistryDeclaration] = Field(default_factory=dict)
    source: dict[str, SourceDeclaration] = Field(default_factory=dict)


@dataclass(frozen=True)
class SourceEntry:
    """A named source after normalization.

    An entry is an origin when registry_url is set and a redirect when
    replace_with is set. When both are present the redirect wins.
    """

    registry_url: str | None = None
    replace_with: str | None = None

    @staticmethod
    def from_source(declaration: SourceDeclaration) -> "SourceEntry":
        return SourceEntry(
            registry_url=declaration.registry,
            replace_with=declaration.replace_with,
        )

    @staticmethod
    def from_registry(declaration: RegistryDeclaration) -> "SourceEntry":
        return SourceEntry(registry_url=declaration.index, replace_with=None)
