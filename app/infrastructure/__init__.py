"""Infrastructure modules for the site translation service.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings)
- logging: Structured logging setup (get_module_logger, configure_logging)
- i18n: Translation resolution, caching and stores
- clients: AWS clients (DynamoDB)
- operations: Operation results for external calls
- services: Dependency injection services (SettingsDep, TranslationResolverDep, get_settings)
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import get_module_logger

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

# Dependency Injection Services
from infrastructure.services import (
    SettingsDep,
    TranslationResolverDep,
    get_settings,
    get_translation_resolver,
)

__all__ = [
    # Configuration
    "settings",
    # Logging
    "get_module_logger",
    # Operations
    "OperationResult",
    "OperationStatus",
    # Dependency Injection Services
    "SettingsDep",
    "TranslationResolverDep",
    "get_settings",
    "get_translation_resolver",
]
