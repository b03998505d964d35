"""Locale negotiation from HTTP Accept-Language headers."""

from typing import Iterable, List, Optional, Tuple

import structlog

from infrastructure.i18n.models import DEFAULT_LOCALE, Locale

logger = structlog.get_logger().bind(component="i18n.negotiation")


def parse_accept_language(header: str) -> List[Tuple[str, float]]:
    """Parse an Accept-Language header into (range, quality) pairs.

    "fr-CA,fr;q=0.9,en;q=0.8" -> [("fr-CA", 1.0), ("fr", 0.9), ("en", 0.8)]

    Ranges with q=0 and the "*" wildcard are dropped. The result is sorted by
    quality, highest first; ties keep header order.
    """
    preferences = []
    for part in header.split(","):
        lang_range, _, params = part.partition(";")
        lang_range = lang_range.strip()
        if not lang_range or lang_range == "*":
            continue

        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 1.0

        if quality <= 0:
            continue
        preferences.append((lang_range, quality))

    return sorted(preferences, key=lambda pref: pref[1], reverse=True)


class LocaleNegotiator:
    """Picks the best supported locale for a request.

    Exact matches win over language-only matches ("pt-BR" falls back to "pt").
    """

    def __init__(
        self,
        default_locale: Locale = DEFAULT_LOCALE,
        supported_locales: Optional[Iterable[Locale]] = None,
    ):
        self.default_locale = default_locale
        self.supported_locales = list(supported_locales or Locale)
        self.log = logger.bind(default_locale=default_locale.value)

    def resolve_from_header(self, accept_language: Optional[str]) -> Locale:
        """Resolve a locale from an Accept-Language header value.

        Args:
            accept_language: Raw header value, may be None.

        Returns:
            First supported locale in preference order, or the default.
        """
        if not accept_language:
            return self.default_locale

        for lang_range, _ in parse_accept_language(accept_language):
            lang_range = lang_range.lower()
            for locale in self.supported_locales:
                if locale.value == lang_range:
                    self.log.debug("resolved_from_header", locale=locale.value)
                    return locale

            lang_code = lang_range.split("-")[0]
            for locale in self.supported_locales:
                if locale.value == lang_code:
                    self.log.debug("resolved_from_header", locale=locale.value)
                    return locale

        self.log.debug("no_matching_locale_in_header", header=accept_language)
        return self.default_locale

    def resolve(self, locale: Optional[str], accept_language: Optional[str]) -> Locale:
        """Explicit locale parameter first, then the header, then the default."""
        if locale:
            return Locale.normalize(locale, default=self.default_locale)
        return self.resolve_from_header(accept_language)
