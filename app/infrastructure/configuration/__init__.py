"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the site
translation service using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation pipeline settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    table_name = settings.i18n.TRANSLATIONS_TABLE_NAME
    aws_region = settings.aws.AWS_REGION

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.features.i18n import I18nSettings

__all__ = ["Settings", "settings", "I18nSettings"]
