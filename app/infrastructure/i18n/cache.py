"""In-memory cache of resolved message trees (thread-safe, TTL-based).

One entry per locale: (MessageTree, inserted_at). Entries are replaced
wholesale, never patched. Expiry is checked when an entry is read; there is
no background sweeper, and an expired entry stays in the mapping until the
next set() or invalidate() for its locale.

The cache lives in process memory only. It is empty after a restart and
every caller must be ready to rebuild on a miss.
"""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from infrastructure.i18n.models import Locale, MessageTree

LocaleKey = Union[Locale, str]


@dataclass(frozen=True)
class CacheEntry:
    """A cached tree and the clock reading when it was stored."""

    tree: MessageTree
    inserted_at: float


def _cache_key(locale: LocaleKey) -> str:
    # Locale members hash by name, so key on the plain code string
    return locale.value if isinstance(locale, Locale) else str(locale)


class TranslationCache:
    """Process-wide mapping of locale -> resolved MessageTree.

    Construct once per process and hand it to the resolver. All access to
    the mapping goes through a single lock.

    Attributes:
        ttl_seconds: Maximum age of an entry before get() reports it absent.
    """

    def __init__(
        self,
        ttl_seconds: float = 300,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, locale: LocaleKey) -> Optional[MessageTree]:
        """Return the cached tree if present and younger than the TTL.

        :param locale: Locale (or raw code) to look up
        :return: Cached tree, or None if missing or expired
        """
        key = _cache_key(locale)
        now = self._clock()

        with self._lock:
            entry = self._entries.get(key)
            if entry is None or now - entry.inserted_at >= self.ttl_seconds:
                self._misses += 1
                return None

            self._hits += 1
            return entry.tree

    def set(self, locale: LocaleKey, tree: MessageTree) -> None:
        """Replace the entry for a locale, timestamped now."""
        entry = CacheEntry(tree=tree, inserted_at=self._clock())
        with self._lock:
            self._entries[_cache_key(locale)] = entry

    def invalidate(self, locale: Optional[LocaleKey] = None) -> int:
        """Remove one locale's entry, or every entry when locale is None.

        Unknown locales are a no-op.

        Returns:
            Number of entries removed.
        """
        with self._lock:
            if locale is None:
                removed = len(self._entries)
                self._entries.clear()
                return removed
            return int(self._entries.pop(_cache_key(locale), None) is not None)

    def get_stats(self) -> Dict[str, Any]:
        """Cache statistics for diagnostics endpoints."""
        now = self._clock()
        with self._lock:
            return {
                "entries": len(self._entries),
                "locales": sorted(
                    key
                    for key, entry in self._entries.items()
                    if now - entry.inserted_at < self.ttl_seconds
                ),
                "ttl_seconds": self.ttl_seconds,
                "hits": self._hits,
                "misses": self._misses,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
