"""Static message bundle loading.

Bundles are JSON documents named <locale>.json. They are read once into a
registration table keyed by Locale, so lookups never dispatch on arbitrary
strings at request time.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping

import structlog

from infrastructure.i18n.errors import BundleMissingError, UnsupportedLocaleError
from infrastructure.i18n.models import Locale, MessageTree

logger = structlog.get_logger()


class BundleLoader(ABC):
    """Abstract base for static message bundle sources."""

    @abstractmethod
    def load(self, locale: Locale) -> MessageTree:
        """Return the bundle tree for a locale.

        Args:
            locale: Locale to load.

        Returns:
            MessageTree with the bundle's messages.

        Raises:
            BundleMissingError: If no bundle is registered for the locale.
        """

    @abstractmethod
    def available_locales(self) -> list[Locale]:
        """Locales that have a registered bundle."""


class JSONBundleLoader(BundleLoader):
    """Loader for <locale>.json bundle files.

    Every file in bundles_dir whose stem is a supported locale code is parsed
    and registered at construction time. Files for unknown locales and files
    that fail to parse are skipped and logged.

    Attributes:
        bundles_dir: Directory containing the JSON bundles.
        bundles: Registration table of Locale -> MessageTree.
    """

    def __init__(self, bundles_dir: Path):
        """Initialize JSON bundle loader.

        Args:
            bundles_dir: Directory with <locale>.json files.

        Raises:
            ValueError: If bundles_dir does not exist.
        """
        self.bundles_dir = Path(bundles_dir)
        self.bundles: Dict[Locale, MessageTree] = {}

        if not self.bundles_dir.is_dir():
            raise ValueError(f"Bundles directory not found: {self.bundles_dir}")

        self.load_all()

        logger.info(
            "initialized_json_bundle_loader",
            bundles_dir=str(self.bundles_dir),
            locale_count=len(self.bundles),
        )

    def register(self, locale: Locale, data: Mapping[str, Any]) -> MessageTree:
        """Register bundle content for a locale, replacing any existing entry."""
        tree = MessageTree.from_dict(data)
        self.bundles[locale] = tree
        return tree

    def load_all(self) -> Dict[Locale, MessageTree]:
        """Read every <locale>.json file in the bundles directory.

        Returns:
            The registration table after loading.
        """
        for bundle_file in sorted(self.bundles_dir.glob("*.json")):
            try:
                locale = Locale.from_string(bundle_file.stem)
            except UnsupportedLocaleError:
                logger.warning("skipped_unknown_bundle", file=str(bundle_file))
                continue

            try:
                with open(bundle_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.error("bundle_parse_error", file=str(bundle_file), error=str(e))
                continue

            if not isinstance(data, dict):
                logger.warning(
                    "invalid_bundle_format", file=str(bundle_file), expected="object"
                )
                continue

            self.register(locale, data)

        logger.info(
            "loaded_bundles",
            locales=[locale.value for locale in self.bundles],
        )
        return self.bundles

    def load(self, locale: Locale) -> MessageTree:
        tree = self.bundles.get(locale)
        if tree is None:
            raise BundleMissingError(
                f"No bundle registered for locale {locale.value} in {self.bundles_dir}"
            )
        return tree

    def available_locales(self) -> list[Locale]:
        return list(self.bundles)
