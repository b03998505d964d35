"""Tests for infrastructure.i18n.negotiation module."""

import pytest

from infrastructure.i18n.models import Locale
from infrastructure.i18n.negotiation import LocaleNegotiator, parse_accept_language


class TestParseAcceptLanguage:
    def test_orders_by_quality(self):
        assert parse_accept_language("en;q=0.5,fr-CA,fr;q=0.9") == [
            ("fr-CA", 1.0),
            ("fr", 0.9),
            ("en", 0.5),
        ]

    def test_drops_wildcard_and_zero_quality(self):
        assert parse_accept_language("*, de;q=0, es;q=0.3") == [("es", 0.3)]

    def test_invalid_quality_defaults_to_one(self):
        assert parse_accept_language("ja;q=abc") == [("ja", 1.0)]


class TestLocaleNegotiator:
    @pytest.fixture
    def negotiator(self):
        return LocaleNegotiator()

    @pytest.mark.parametrize(
        "header, expected",
        [
            ("fr", Locale.FR),
            ("fr-CA,fr;q=0.9,en;q=0.8", Locale.FR),
            ("pt-BR", Locale.PT),
            ("xx-YY,de;q=0.7", Locale.DE),
            ("FIL", Locale.FIL),
            ("en;q=0.1,ar;q=0.9", Locale.AR),
        ],
    )
    def test_resolve_from_header(self, negotiator, header, expected):
        assert negotiator.resolve_from_header(header) == expected

    @pytest.mark.parametrize("header", [None, "", "xx", "*", "fr;q=0"])
    def test_unmatched_header_returns_default(self, negotiator, header):
        assert negotiator.resolve_from_header(header) == Locale.EN

    def test_custom_default_and_supported_set(self):
        negotiator = LocaleNegotiator(
            default_locale=Locale.FR, supported_locales=[Locale.FR, Locale.EN]
        )
        assert negotiator.resolve_from_header("de") == Locale.FR
        assert negotiator.resolve_from_header("en-GB") == Locale.EN

    def test_explicit_locale_wins_over_header(self, negotiator):
        assert negotiator.resolve("es", "fr") == Locale.ES

    def test_explicit_unsupported_locale_normalizes_to_default(self, negotiator):
        assert negotiator.resolve("zz", "fr") == Locale.EN

    def test_header_used_without_explicit_locale(self, negotiator):
        assert negotiator.resolve(None, "ja,en;q=0.5") == Locale.JA
