"""Factory functions for creating i18n components.

Builds the translation pipeline (store, bundle loader, cache, resolver) from
application settings.
"""

from pathlib import Path
from typing import Optional

import structlog

from infrastructure.clients.aws import DynamoDBClient, SessionProvider
from infrastructure.configuration import Settings
from infrastructure.i18n.cache import TranslationCache
from infrastructure.i18n.loader import JSONBundleLoader
from infrastructure.i18n.models import Locale
from infrastructure.i18n.resolver import TranslationResolver
from infrastructure.i18n.store import (
    DynamoDBTranslationStore,
    InMemoryTranslationStore,
    TranslationStore,
)

logger = structlog.get_logger()


def create_translation_store(settings: Settings) -> TranslationStore:
    """Create the configured translation store backend.

    Args:
        settings: Application settings.

    Returns:
        DynamoDBTranslationStore, or InMemoryTranslationStore when
        TRANSLATION_STORE_BACKEND is "memory".
    """
    if settings.i18n.TRANSLATION_STORE_BACKEND == "memory":
        logger.info("translation_store_created", backend="memory")
        return InMemoryTranslationStore()

    session_provider = SessionProvider(
        region=settings.aws.AWS_REGION,
        service_role_map=settings.aws.SERVICE_ROLE_MAP,
        endpoint_url=settings.aws.ENDPOINT_URL,
    )
    store = DynamoDBTranslationStore(
        client=DynamoDBClient(session_provider),
        table_name=settings.i18n.TRANSLATIONS_TABLE_NAME,
    )
    logger.info(
        "translation_store_created",
        backend="dynamodb",
        table=settings.i18n.TRANSLATIONS_TABLE_NAME,
    )
    return store


def create_translation_resolver(
    settings: Settings,
    store: Optional[TranslationStore] = None,
    bundles_dir: Optional[Path] = None,
) -> TranslationResolver:
    """Create a TranslationResolver with a fresh cache.

    Args:
        settings: Application settings.
        store: Store to use instead of the configured backend.
        bundles_dir: Bundle directory override (default: settings value).

    Returns:
        TranslationResolver: Configured resolver.

    Raises:
        ValueError: If the bundles directory does not exist.

    Usage:
        resolver = create_translation_resolver(settings)
        tree = await resolver.resolve("fr")
    """
    loader = JSONBundleLoader(bundles_dir or settings.i18n.TRANSLATION_BUNDLES_DIR)
    cache = TranslationCache(ttl_seconds=settings.i18n.TRANSLATION_CACHE_TTL_SECONDS)
    default_locale = Locale.normalize(settings.i18n.DEFAULT_LOCALE)

    resolver = TranslationResolver(
        store=store or create_translation_store(settings),
        loader=loader,
        cache=cache,
        default_locale=default_locale,
    )
    logger.info(
        "translation_resolver_created",
        default_locale=default_locale.value,
        ttl_seconds=cache.ttl_seconds,
        bundle_count=len(loader.available_locales()),
    )
    return resolver
