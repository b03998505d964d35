"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n.negotiation import LocaleNegotiator
from infrastructure.i18n.resolver import TranslationResolver
from infrastructure.services.providers import (
    get_locale_negotiator,
    get_settings,
    get_translation_resolver,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Translation resolver dependency - shares the process-wide translation cache
# Usage: await resolver.resolve("fr"), resolver.invalidate("fr")
TranslationResolverDep = Annotated[
    TranslationResolver, Depends(get_translation_resolver)
]

# Accept-Language negotiation dependency
LocaleNegotiatorDep = Annotated[LocaleNegotiator, Depends(get_locale_negotiator)]

__all__ = [
    "SettingsDep",
    "TranslationResolverDep",
    "LocaleNegotiatorDep",
]
