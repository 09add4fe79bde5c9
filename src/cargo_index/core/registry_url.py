"""Absolute registry index URLs.

Cargo hashes the serialization produced by the Rust `url` crate, which follows
the WHATWG URL Standard. Parsing goes through ada, a WHATWG-conformant parser,
so the string fed to the cache key is the same one Cargo hashes: dot segments
removed, percent-encoding applied, special-scheme hosts folded and opaque
hosts kept as written.
"""

from dataclasses import dataclass

from ada_url import URL


class InvalidRegistryUrlError(ValueError):
    """The text is not a valid absolute URL."""


@dataclass(frozen=True)
class RegistryUrl:
    """A parsed, normalized absolute URL identifying a registry index."""

    href: str
    scheme: str
    host: str  # Empty when the URL has no host, e.g. file:///srv/index
    path: str

    def __str__(self) -> str:
        return self.href

    def as_str(self) -> str:
        """Canonical serialization, the exact string Cargo hashes."""
        return self.href

    @staticmethod
    def parse(text: str) -> "RegistryUrl":
        """Parse and normalize an absolute URL.

        Raises:
            InvalidRegistryUrlError: If `text` is not a valid absolute URL
        """
        try:
            parsed = URL(text)
        except ValueError as e:
            raise InvalidRegistryUrlError(f"'{text}' is not a valid absolute URL") from e

        return RegistryUrl(
            href=parsed.href,
            scheme=parsed.protocol.removesuffix(":"),
            host=parsed.hostname,
            path=parsed.pathname,
        )
