import time
from typing import List, Optional

from fastapi import APIRouter, HTTPException

from infrastructure.i18n.errors import RecordConflictError, RecordNotFoundError
from infrastructure.i18n.models import Locale
from infrastructure.logging import get_module_logger
from infrastructure.services import TranslationResolverDep
from modules.translations import schemas, service

logger = get_module_logger()

# Controllers are thin adapters: they accept Pydantic request models, call the
# service boundary, and return Pydantic response models. Store outages raise
# StoreUnavailableError, which the application maps to 503.
router = APIRouter(prefix="/api/admin/translations", tags=["translations-admin"])


def _response(record) -> schemas.TranslationResponse:
    return schemas.TranslationResponse.model_validate(record.to_dict())


@router.get("/", response_model=schemas.TranslationListEnvelope)
async def list_translations_endpoint(
    resolver: TranslationResolverDep,
    locale: Optional[Locale] = None,
    namespace: Optional[str] = None,
    search: Optional[str] = None,
):
    """List translation records.

    Filters combine: `locale` and `namespace` match exactly, `search` is a
    case-insensitive substring of the key or the value. Sorted by locale,
    then key.
    """
    records = await service.list_translations(
        resolver, locale=locale, namespace=namespace, search=search or None
    )
    return schemas.TranslationListEnvelope(data=[_response(r) for r in records])


@router.post("/", response_model=schemas.TranslationEnvelope, status_code=201)
async def create_translation_endpoint(
    request: schemas.TranslationCreateRequest, resolver: TranslationResolverDep
):
    """Create or replace the record for (key, locale)."""
    record = await service.save_translation(resolver, request)
    return schemas.TranslationEnvelope(
        message="Translation saved successfully", data=_response(record)
    )


@router.post("/bulk", response_model=schemas.TranslationListEnvelope)
async def bulk_save_translations_endpoint(
    requests: List[schemas.TranslationCreateRequest],
    resolver: TranslationResolverDep,
):
    """Upsert a list of records in one call."""
    records = await service.save_translations(resolver, requests)
    return schemas.TranslationListEnvelope(
        message="Translations updated successfully",
        data=[_response(r) for r in records],
    )


@router.post("/clear-cache", response_model=schemas.MessageResponse)
async def clear_cache_endpoint(
    resolver: TranslationResolverDep,
    request: Optional[schemas.CacheRequest] = None,
):
    """Drop cached trees for one locale, or for every locale."""
    locale = request.locale if request else None
    removed = service.clear_cache(resolver, locale)
    logger.info(
        "translation_cache_clear_requested",
        locale=locale.value if locale else None,
        removed=removed,
    )
    message = f"Cache cleared for {locale.value}" if locale else "All cache cleared"
    return schemas.MessageResponse(message=message)


@router.post("/refresh", response_model=schemas.RefreshResponse)
async def refresh_endpoint(
    resolver: TranslationResolverDep,
    request: Optional[schemas.CacheRequest] = None,
):
    """Invalidate and immediately re-resolve a locale.

    Returns the fresh message tree so an admin can confirm an edit is
    visible. Without a locale the whole cache is cleared.
    """
    locale = request.locale if request else None
    tree = await service.refresh(resolver, locale)
    timestamp = int(time.time() * 1000)

    if locale is None:
        return schemas.RefreshResponse(message="All cache cleared", timestamp=timestamp)

    return schemas.RefreshResponse(
        message=f"Cache refreshed for {locale.value}",
        locale=locale,
        data=tree.to_dict() if tree is not None else {},
        timestamp=timestamp,
    )


@router.get("/{locale}/{key}", response_model=schemas.TranslationEnvelope)
async def get_translation_endpoint(
    locale: Locale, key: str, resolver: TranslationResolverDep
):
    try:
        record = await service.get_translation(resolver, locale, key)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return schemas.TranslationEnvelope(data=_response(record))


@router.put("/{locale}/{key}", response_model=schemas.TranslationEnvelope)
async def update_translation_endpoint(
    locale: Locale,
    key: str,
    request: schemas.TranslationUpdateRequest,
    resolver: TranslationResolverDep,
):
    """Update a record. Changing key or locale moves it."""
    try:
        record = await service.update_translation(resolver, locale, key, request)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except RecordConflictError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return schemas.TranslationEnvelope(
        message="Translation updated successfully", data=_response(record)
    )


@router.delete("/{locale}/{key}", response_model=schemas.MessageResponse)
async def delete_translation_endpoint(
    locale: Locale, key: str, resolver: TranslationResolverDep
):
    try:
        await service.delete_translation(resolver, locale, key)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return schemas.MessageResponse(message="Translation deleted successfully")
