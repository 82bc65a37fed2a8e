"""Memoized known variations, keyed by phenotype id.

The cache never decides on its own when an entry is stale. Whoever
writes observations must call invalidate() for the affected phenotype;
PhenotypeService does this through a RecordStore listener.
"""

from typing import Callable

from genoshare.config.debug import get_logger

logger = get_logger(__name__)


class KnownVariationsCache:
    """Maps phenotype id -> computed known variations."""

    def __init__(self):
        self._entries: dict[int, list[str]] = {}
        self.hits = 0
        self.misses = 0

    def get_or_compute(self, phenotype_id: int, compute: Callable[[], list[str]]) -> list[str]:
        """Return the cached value, computing and storing it on a miss.

        A copy is returned so callers cannot mutate the cached list.
        """
        if phenotype_id in self._entries:
            self.hits += 1
        else:
            self.misses += 1
            self._entries[phenotype_id] = compute()
        return list(self._entries[phenotype_id])

    def invalidate(self, phenotype_id: int) -> bool:
        """Drop the entry for one phenotype. Returns True if one was cached."""
        dropped = self._entries.pop(phenotype_id, None) is not None
        if dropped:
            logger.debug(f"Invalidated known variations for phenotype #{phenotype_id}")
        return dropped

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, phenotype_id: int) -> bool:
        return phenotype_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
