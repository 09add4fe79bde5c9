"""Cargo source kinds, as they take part in source identity hashing."""

from enum import Enum

from cargo_index.core.siphash import SipHasher


class SourceKind(Enum):
    """Kinds of package sources, in Cargo's declaration order.

    Member values are the enum discriminants Rust's derived `Hash` writes, so
    the order here is part of the hashed format. Only REGISTRY is produced by
    this package.
    """

    GIT = 0
    PATH = 1
    REGISTRY = 2
    LOCAL_REGISTRY = 3
    DIRECTORY = 4

    def hash_into(self, hasher: SipHasher) -> None:
        """Write the discriminant the way a derived `Hash` impl does."""
        hasher.write_isize(self.value)
