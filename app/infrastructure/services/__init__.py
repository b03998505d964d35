"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    TranslationResolverDep,
    LocaleNegotiatorDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_translation_resolver,
    get_locale_negotiator,
)

__all__ = [
    "SettingsDep",
    "TranslationResolverDep",
    "LocaleNegotiatorDep",
    "get_settings",
    "get_translation_resolver",
    "get_locale_negotiator",
]
