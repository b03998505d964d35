"""Service layer for the translations admin module.

Async service functions that act as the boundary between the admin
controllers and the translation pipeline. Every store write is followed by
cache invalidation for the affected locales. Invalidation is not
transactional with the write: if it is skipped, readers see the previous
tree until the cache TTL expires.
"""

from typing import List, Optional

from infrastructure.i18n.errors import RecordConflictError, RecordNotFoundError
from infrastructure.i18n.models import Locale, MessageTree, TranslationRecord
from infrastructure.i18n.resolver import TranslationResolver
from infrastructure.logging import get_module_logger
from modules.translations import schemas

logger = get_module_logger()

__all__ = [
    "list_translations",
    "get_translation",
    "save_translation",
    "save_translations",
    "update_translation",
    "delete_translation",
    "clear_cache",
    "refresh",
]


def _to_record(request: schemas.TranslationCreateRequest) -> TranslationRecord:
    return TranslationRecord(
        key=request.key,
        locale=request.locale,
        value=request.value,
        namespace=request.namespace,
    )


async def list_translations(
    resolver: TranslationResolver,
    locale: Optional[Locale] = None,
    namespace: Optional[str] = None,
    search: Optional[str] = None,
) -> List[TranslationRecord]:
    """List records sorted by (locale, key), optionally filtered."""
    return await resolver.store.list_records(
        locale=locale, namespace=namespace, search=search
    )


async def get_translation(
    resolver: TranslationResolver, locale: Locale, key: str
) -> TranslationRecord:
    """Fetch one record.

    Raises:
        RecordNotFoundError: If no record exists for (locale, key).
    """
    record = await resolver.store.get_record(locale, key)
    if record is None:
        raise RecordNotFoundError(f"Translation not found: {locale.value}/{key}")
    return record


async def save_translation(
    resolver: TranslationResolver, request: schemas.TranslationCreateRequest
) -> TranslationRecord:
    """Upsert a record on (key, locale) and invalidate its locale."""
    record = await resolver.store.upsert_record(_to_record(request))
    resolver.invalidate(record.locale)
    logger.info("translation_saved", locale=record.locale.value, key=record.key)
    return record


async def save_translations(
    resolver: TranslationResolver,
    requests: List[schemas.TranslationCreateRequest],
) -> List[TranslationRecord]:
    """Upsert many records.

    A batch touching a single locale invalidates that locale; a batch that
    spans locales clears the whole cache. Records written before a store
    failure stay written, and the cache is still invalidated for them.
    """
    saved: List[TranslationRecord] = []
    try:
        for request in requests:
            saved.append(await resolver.store.upsert_record(_to_record(request)))
    finally:
        touched = {record.locale for record in saved}
        if len(touched) == 1:
            resolver.invalidate(touched.pop())
        elif touched:
            resolver.invalidate()

    logger.info(
        "translations_bulk_saved",
        count=len(saved),
        locales=sorted(record.locale.value for record in saved),
    )
    return saved


async def update_translation(
    resolver: TranslationResolver,
    locale: Locale,
    key: str,
    request: schemas.TranslationUpdateRequest,
) -> TranslationRecord:
    """Update a record, moving it when key or locale changes.

    Raises:
        RecordNotFoundError: If the record does not exist.
        RecordConflictError: If a move targets an existing record.
    """
    existing = await get_translation(resolver, locale, key)

    new_key = request.key or existing.key
    new_locale = request.locale or existing.locale
    moved = (new_key, new_locale) != (existing.key, existing.locale)

    if moved and await resolver.store.get_record(new_locale, new_key) is not None:
        raise RecordConflictError(
            f"Translation already exists: {new_locale.value}/{new_key}"
        )

    if request.namespace is not None:
        namespace = request.namespace
    elif new_key != existing.key:
        namespace = None
    else:
        namespace = existing.namespace

    updated = TranslationRecord(
        key=new_key,
        locale=new_locale,
        value=request.value if request.value is not None else existing.value,
        namespace=namespace,
    )

    try:
        stored = await resolver.store.upsert_record(updated)
        if moved:
            await resolver.store.delete_record(existing.locale, existing.key)
    finally:
        resolver.invalidate(existing.locale)
        if new_locale != existing.locale:
            resolver.invalidate(new_locale)

    logger.info(
        "translation_updated",
        locale=new_locale.value,
        key=new_key,
        moved=moved,
    )
    return stored


async def delete_translation(
    resolver: TranslationResolver, locale: Locale, key: str
) -> None:
    """Delete a record and invalidate its locale.

    Raises:
        RecordNotFoundError: If the record does not exist.
    """
    deleted = await resolver.store.delete_record(locale, key)
    if not deleted:
        raise RecordNotFoundError(f"Translation not found: {locale.value}/{key}")
    resolver.invalidate(locale)
    logger.info("translation_deleted", locale=locale.value, key=key)


def clear_cache(resolver: TranslationResolver, locale: Optional[Locale] = None) -> int:
    """Invalidate one locale or the whole cache. Returns entries removed."""
    return resolver.invalidate(locale)


async def refresh(
    resolver: TranslationResolver, locale: Optional[Locale] = None
) -> Optional[MessageTree]:
    """Re-resolve a locale eagerly, or clear everything when no locale is given."""
    if locale is None:
        resolver.invalidate()
        return None
    return await resolver.force_refresh(locale)
