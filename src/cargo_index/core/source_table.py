"""Merged name -> source lookup table and redirect resolution.

Sources form singly linked lists: a `replace-with` entry points at another
name, and the tail of the list carries the registry URL. The table stores the
links flat and `follow_redirects` walks them iteratively.
"""

import logging
from collections.abc import Iterator

from cargo_index.core.config_schema import CargoConfig, SourceEntry
from cargo_index.core.errors import SourceCycleError, SourceNotFoundError

logger = logging.getLogger(__name__)


class SourceTable:
    """First-writer-wins mapping of source names to entries.

    Config files are merged nearest-first, so the first declaration of a name
    is the highest-precedence one and later declarations are ignored.
    """

    def __init__(self) -> None:
        self._entries: dict[str, SourceEntry] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def get(self, name: str) -> SourceEntry | None:
        return self._entries.get(name)

    def insert(self, name: str, entry: SourceEntry) -> bool:
        """Insert an entry unless the name is already populated.

        Returns:
            True if the entry was stored, False if an earlier one was kept
        """
        if name in self._entries:
            logger.debug("  - %s already declared, ignoring later declaration", name)
            return False
        self._entries[name] = entry
        return True

    def merge_config(self, config: CargoConfig) -> None:
        """Merge one config file's declarations.

        `[source]` tables are merged before `[registries]` tables so that a
        `source` declaration wins over a `registries` declaration of the same
        name in the same file.
        """
        for name, source in config.source.items():
            if self.insert(name, SourceEntry.from_source(source)):
                logger.debug("  - source %s: %s", name, source)
        for name, registry in config.registries.items():
            if self.insert(name, SourceEntry.from_registry(registry)):
                logger.debug("  - registry %s: index=%s", name, registry.index)

    def follow_redirects(self, name: str, entry: SourceEntry) -> SourceEntry:
        """Walk replace-with links from `entry` to the end of the chain.

        Args:
            name: Name `entry` was found under (for cycle reporting)
            entry: Head of the chain

        Returns:
            The first entry in the chain without a replace-with link

        Raises:
            SourceNotFoundError: If a replace-with target is not declared
            SourceCycleError: If the chain revisits a name
        """
        chain = [name]
        current = entry
        while current.replace_with is not None:
            target = current.replace_with
            if target in chain:
                raise SourceCycleError(target, chain)

            found = self._entries.get(target)
            if found is None:
                raise SourceNotFoundError(target)

            logger.debug("Source %s is replaced with %s", chain[-1], target)
            chain.append(target)
            current = found
        return current
