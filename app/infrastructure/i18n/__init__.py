"""i18n system - translation resolution and caching for the site.

Merges translation records edited in the store with static per-locale
message bundles, caching the result per locale.

Main components:
- models: Locale, TranslationRecord, MessageTree
- store: TranslationStore, DynamoDBTranslationStore, InMemoryTranslationStore
- loader: BundleLoader and JSONBundleLoader
- cache: TranslationCache
- resolver: TranslationResolver
- negotiation: LocaleNegotiator for Accept-Language headers
"""

from infrastructure.i18n.cache import TranslationCache
from infrastructure.i18n.errors import (
    BundleMissingError,
    RecordConflictError,
    RecordNotFoundError,
    StoreUnavailableError,
    TranslationError,
    UnsupportedLocaleError,
)
from infrastructure.i18n.loader import BundleLoader, JSONBundleLoader
from infrastructure.i18n.models import (
    DEFAULT_LOCALE,
    Locale,
    MessageTree,
    TranslationRecord,
)
from infrastructure.i18n.negotiation import LocaleNegotiator
from infrastructure.i18n.resolver import TranslationResolver
from infrastructure.i18n.store import (
    DynamoDBTranslationStore,
    InMemoryTranslationStore,
    TranslationStore,
)

__all__ = [
    "DEFAULT_LOCALE",
    "Locale",
    "MessageTree",
    "TranslationRecord",
    "TranslationStore",
    "DynamoDBTranslationStore",
    "InMemoryTranslationStore",
    "BundleLoader",
    "JSONBundleLoader",
    "TranslationCache",
    "TranslationResolver",
    "LocaleNegotiator",
    "TranslationError",
    "StoreUnavailableError",
    "BundleMissingError",
    "UnsupportedLocaleError",
    "RecordNotFoundError",
    "RecordConflictError",
]
