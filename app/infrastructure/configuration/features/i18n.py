"""Translation pipeline feature settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings

# app/infrastructure/configuration/features/i18n.py -> app/locales
DEFAULT_BUNDLES_DIR = Path(__file__).resolve().parents[3] / "locales"


class I18nSettings(FeatureSettings):
    """Translation store, bundle and cache configuration.

    Environment Variables:
        TRANSLATIONS_TABLE_NAME: DynamoDB table holding translation records
        TRANSLATION_STORE_BACKEND: "dynamodb" or "memory" (local development)
        TRANSLATION_CACHE_TTL_SECONDS: Max age of a cached message tree (default: 300s)
        TRANSLATION_BUNDLES_DIR: Directory of <locale>.json message bundles
        DEFAULT_LOCALE: Locale substituted for unsupported requests (default: en)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        ttl = settings.i18n.TRANSLATION_CACHE_TTL_SECONDS
        bundles = settings.i18n.TRANSLATION_BUNDLES_DIR
        ```
    """

    TRANSLATIONS_TABLE_NAME: str = Field(
        default="site_translations", alias="TRANSLATIONS_TABLE_NAME"
    )
    TRANSLATION_STORE_BACKEND: Literal["dynamodb", "memory"] = Field(
        default="dynamodb", alias="TRANSLATION_STORE_BACKEND"
    )
    TRANSLATION_CACHE_TTL_SECONDS: int = Field(
        default=300, alias="TRANSLATION_CACHE_TTL_SECONDS"
    )
    TRANSLATION_BUNDLES_DIR: Path = Field(
        default=DEFAULT_BUNDLES_DIR, alias="TRANSLATION_BUNDLES_DIR"
    )
    DEFAULT_LOCALE: str = Field(default="en", alias="DEFAULT_LOCALE")

    @field_validator("TRANSLATION_CACHE_TTL_SECONDS")
    @classmethod
    def validate_ttl(cls, v: int) -> int:
        """Reject non-positive TTLs."""
        if v <= 0:
            raise ValueError("TRANSLATION_CACHE_TTL_SECONDS must be positive")
        return v

    @field_validator("DEFAULT_LOCALE")
    @classmethod
    def normalize_default_locale(cls, v: str) -> str:
        """Store the default locale as a lowercase code."""
        return v.strip().lower()
