from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.i18n.resolver import TranslationResolver
from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_settings, get_translation_resolver

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(
        log_level=settings.LOG_LEVEL, is_production=settings.is_production
    )


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _activate_translations(app: FastAPI, logger: BoundLogger) -> TranslationResolver:
    try:
        resolver = get_translation_resolver()
    except Exception as exc:
        logger.error("translation_resolver_activation_failed", error=str(exc))
        raise

    app.state.translation_resolver = resolver
    logger.info(
        "translation_resolver_activated",
        default_locale=resolver.default_locale.value,
        bundles=[locale.value for locale in resolver.loader.available_locales()],
    )
    return resolver


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    resolver = _activate_translations(app, logger)

    yield

    logger.info("application_shutdown")
    removed = resolver.invalidate()
    logger.info("translation_cache_released", removed=removed)
