"""Translation resolution: cache, store, bundle and merge.

resolve(locale) produces the message tree served for a locale:

1. Normalize the locale (unsupported codes become the default locale).
2. Return the cached tree when present.
3. Otherwise query the store and rebuild a tree from the records.
4. Load the locale's bundle, falling back to the default locale's bundle,
   then to an empty tree.
5. Deep-merge with store values overriding bundle values.
6. Cache and return the merged tree.

Store outages and missing bundles degrade the result; they are logged and
never raised to the caller.
"""

from typing import Union

import structlog

from infrastructure.i18n.cache import TranslationCache
from infrastructure.i18n.errors import BundleMissingError, StoreUnavailableError
from infrastructure.i18n.loader import BundleLoader
from infrastructure.i18n.models import DEFAULT_LOCALE, Locale, MessageTree
from infrastructure.i18n.store import TranslationStore

logger = structlog.get_logger().bind(component="i18n.resolver")


class TranslationResolver:
    """Resolves merged message trees per locale.

    The cache is injected so each process (or test) owns its own instance.

    Attributes:
        store: Source of translation records edited by admins.
        loader: Static bundle registration table.
        cache: Per-locale cache of merged trees.
        default_locale: Locale substituted for unsupported codes.
    """

    def __init__(
        self,
        store: TranslationStore,
        loader: BundleLoader,
        cache: TranslationCache,
        default_locale: Locale = DEFAULT_LOCALE,
    ):
        self.store = store
        self.loader = loader
        self.cache = cache
        self.default_locale = default_locale

    def resolved_locale(self, locale: Union[Locale, str, None]) -> Locale:
        """Locale that resolve() serves for a requested code."""
        return Locale.normalize(locale, default=self.default_locale)

    async def resolve(self, locale: Union[Locale, str, None]) -> MessageTree:
        """Return the merged message tree for a locale.

        Args:
            locale: Requested locale code; anything unsupported resolves as
                the default locale.

        Returns:
            MessageTree, possibly empty. Callers must not mutate it.
        """
        target = self.resolved_locale(locale)
        log = logger.bind(locale=target.value)

        cached = self.cache.get(target)
        if cached is not None:
            log.debug("translation_cache_hit")
            return cached

        log.debug("translation_cache_miss")

        degraded = False
        try:
            records = await self.store.query_records_by_locale(target)
        except StoreUnavailableError as e:
            log.warning(
                "translation_store_unavailable",
                error=str(e),
                error_code=e.error_code,
            )
            records = []
            degraded = True

        db_tree = MessageTree.from_records(records)
        merged = self._load_bundle(target).merge(db_tree)

        if degraded:
            # Bundle-only trees are never cached
            log.info("translation_tree_not_cached", reason="store_unavailable")
        else:
            self.cache.set(target, merged)

        log.info(
            "translation_tree_resolved",
            record_count=len(records),
            leaf_count=len(merged.flatten()),
            degraded=degraded,
        )
        return merged

    def _load_bundle(self, locale: Locale) -> MessageTree:
        try:
            return self.loader.load(locale)
        except BundleMissingError as e:
            logger.warning("translation_bundle_missing", locale=locale.value, error=str(e))

        if locale != self.default_locale:
            try:
                return self.loader.load(self.default_locale)
            except BundleMissingError as e:
                logger.warning(
                    "translation_bundle_missing",
                    locale=self.default_locale.value,
                    error=str(e),
                )

        logger.error("translation_bundle_fallback_empty", locale=locale.value)
        return MessageTree()

    def invalidate(self, locale: Union[Locale, str, None] = None) -> int:
        """Drop the cached tree for a locale, or every cached tree.

        Unsupported locale codes are a no-op.

        Returns:
            Number of cache entries removed.
        """
        if locale is None:
            removed = self.cache.invalidate()
            logger.info("translation_cache_cleared", removed=removed)
            return removed

        try:
            target = Locale(locale)
        except ValueError:
            logger.debug("translation_invalidate_unknown_locale", locale=str(locale))
            return 0

        removed = self.cache.invalidate(target)
        logger.info("translation_cache_invalidated", locale=target.value, removed=removed)
        return removed

    async def force_refresh(self, locale: Union[Locale, str, None]) -> MessageTree:
        """Invalidate a locale and resolve it again immediately."""
        target = self.resolved_locale(locale)
        self.invalidate(target)
        return await self.resolve(target)

    def get_stats(self) -> dict:
        """Cache statistics plus the registered bundle locales."""
        stats = self.cache.get_stats()
        stats["bundles"] = [locale.value for locale in self.loader.available_locales()]
        return stats
