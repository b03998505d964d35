"""Public translation endpoints used by the page-rendering layer."""

import time
from typing import Annotated, Optional

from fastapi import APIRouter, Header, Query

from infrastructure.logging import get_module_logger
from infrastructure.services import LocaleNegotiatorDep, TranslationResolverDep

logger = get_module_logger()
router = APIRouter(prefix="/api/translations", tags=["Translations"])


@router.get("")
async def get_translations(
    resolver: TranslationResolverDep,
    negotiator: LocaleNegotiatorDep,
    locale: Annotated[
        Optional[str], Query(description="Locale code, e.g. 'fr'")
    ] = None,
    accept_language: Annotated[Optional[str], Header()] = None,
):
    """Merged message tree for a locale.

    Without a locale query parameter the Accept-Language header is
    negotiated. Unsupported locales resolve as the default locale.
    """
    target = negotiator.resolve(locale, accept_language)
    tree = await resolver.resolve(target)
    return {"locale": target.value, "data": tree.to_dict()}


@router.get("/refresh")
async def refresh_translations(
    resolver: TranslationResolverDep,
    locale: Annotated[Optional[str], Query()] = None,
    force: Annotated[bool, Query(description="Drop the cached tree first")] = False,
):
    """Resolve a locale, optionally invalidating its cached tree first."""
    if force:
        tree = await resolver.force_refresh(locale)
    else:
        tree = await resolver.resolve(locale)

    target = resolver.resolved_locale(locale)
    logger.info("translations_refreshed", locale=target.value, force=force)
    return {
        "locale": target.value,
        "data": tree.to_dict(),
        "timestamp": int(time.time() * 1000),
    }
