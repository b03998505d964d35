"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_translation_resolver
from infrastructure.i18n.models import Locale
from infrastructure.i18n.negotiation import LocaleNegotiator
from infrastructure.i18n.resolver import TranslationResolver


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process,
    even if called from multiple packages.

    Infrastructure packages should use this directly to ensure singleton consistency:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.i18n.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_resolver() -> TranslationResolver:
    """
    Get application-scoped translation resolver singleton.

    The resolver owns the process-wide translation cache, so every request
    and admin mutation must share this one instance.

    Returns:
        TranslationResolver: Resolver wired to the configured store and bundles.

    Usage:
        @router.get("/messages")
        async def messages(resolver: TranslationResolverDep):
            tree = await resolver.resolve("fr")
            return tree.to_dict()
    """
    return create_translation_resolver(get_settings())


@lru_cache
def get_locale_negotiator() -> LocaleNegotiator:
    """Get application-scoped locale negotiator for Accept-Language headers."""
    settings = get_settings()
    return LocaleNegotiator(default_locale=Locale.normalize(settings.i18n.DEFAULT_LOCALE))
