"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_bundle_data,
    make_record,
    make_records,
)

__all__ = [
    "make_bundle_data",
    "make_record",
    "make_records",
]
