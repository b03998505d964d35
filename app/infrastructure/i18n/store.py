"""Translation store backends.

Translation records live in a document table keyed by (locale, key). The
resolver only needs query_records_by_locale; the admin endpoints use the
remaining CRUD operations.

Backends:
- DynamoDBTranslationStore: partition key "locale", sort key "key". boto3 is
  synchronous, so every call is moved off the event loop with
  asyncio.to_thread.
- InMemoryTranslationStore: process-local dict for tests and local runs.
"""

import asyncio
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

import structlog
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer  # type: ignore

from infrastructure.clients.aws.dynamodb import DynamoDBClient
from infrastructure.i18n.errors import StoreUnavailableError
from infrastructure.i18n.models import Locale, TranslationRecord
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def filter_records(
    records: Iterable[TranslationRecord],
    namespace: Optional[str] = None,
    search: Optional[str] = None,
) -> List[TranslationRecord]:
    """Apply admin listing filters and sort by (locale, key).

    Args:
        records: Records to filter.
        namespace: Exact namespace to keep.
        search: Case-insensitive substring matched against key or value.

    Returns:
        Matching records ordered by locale code, then key.
    """
    needle = search.lower() if search else None
    matched = [
        record
        for record in records
        if (namespace is None or record.namespace == namespace)
        and (
            needle is None
            or needle in record.key.lower()
            or needle in record.value.lower()
        )
    ]
    return sorted(matched, key=lambda record: (record.locale.value, record.key))


class TranslationStore(ABC):
    """Persistent source of translation records."""

    @abstractmethod
    async def query_records_by_locale(self, locale: Locale) -> List[TranslationRecord]:
        """Return every record for one locale.

        Raises:
            StoreUnavailableError: If the backend cannot be reached.
        """

    @abstractmethod
    async def list_records(
        self,
        locale: Optional[Locale] = None,
        namespace: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[TranslationRecord]:
        """Return records matching the filters, sorted by (locale, key)."""

    @abstractmethod
    async def get_record(self, locale: Locale, key: str) -> Optional[TranslationRecord]:
        """Return the record for (locale, key), or None."""

    @abstractmethod
    async def upsert_record(self, record: TranslationRecord) -> TranslationRecord:
        """Create or replace the record for (record.locale, record.key).

        The original creation timestamp is kept when the record exists.
        """

    @abstractmethod
    async def delete_record(self, locale: Locale, key: str) -> bool:
        """Delete the record for (locale, key). Returns False if it was absent."""


class DynamoDBTranslationStore(TranslationStore):
    """DynamoDB-backed translation store.

    Args:
        client: DynamoDBClient used for every call
        table_name: Table with partition key "locale" and sort key "key"
    """

    def __init__(self, client: DynamoDBClient, table_name: str):
        self._client = client
        self.table_name = table_name
        self._logger = logger.bind(component="translation_store", table=table_name)

    @staticmethod
    def _key(locale: Locale, key: str) -> Dict[str, Any]:
        return {"locale": {"S": locale.value}, "key": {"S": key}}

    def _unwrap(self, result: OperationResult, operation: str) -> Any:
        if result.is_success:
            return result.data
        self._logger.error(
            "translation_store_call_failed",
            operation=operation,
            status=result.status.value,
            error_code=result.error_code,
            error=result.message,
        )
        raise StoreUnavailableError(
            f"Translation store {operation} failed: {result.message}",
            error_code=result.error_code,
        )

    def _to_record(self, item: Dict[str, Any]) -> Optional[TranslationRecord]:
        data = {name: _deserializer.deserialize(value) for name, value in item.items()}
        namespace = data.get("namespace")
        try:
            key = data["key"]
            if not isinstance(key, str):
                raise TypeError(f"key must be a string, got {type(key).__name__}")
            return TranslationRecord(
                key=key,
                locale=Locale.from_string(data["locale"]),
                value=str(data.get("value", "")),
                namespace=namespace if isinstance(namespace, str) else None,
                created_at=data.get("created_at"),
                updated_at=data.get("updated_at"),
            )
        except (KeyError, TypeError, ValueError) as e:
            self._logger.warning(
                "skipped_invalid_translation_item",
                locale=data.get("locale"),
                key=data.get("key"),
                error=str(e),
            )
            return None

    def _to_records(self, items: Iterable[Dict[str, Any]]) -> List[TranslationRecord]:
        records = (self._to_record(item) for item in items)
        return [record for record in records if record is not None]

    async def query_records_by_locale(self, locale: Locale) -> List[TranslationRecord]:
        result = await asyncio.to_thread(
            self._client.query,
            self.table_name,
            KeyConditionExpression="#locale = :locale",
            ExpressionAttributeNames={"#locale": "locale"},
            ExpressionAttributeValues={":locale": {"S": locale.value}},
        )
        records = self._to_records(self._unwrap(result, "query") or [])
        self._logger.debug(
            "translation_records_queried", locale=locale.value, count=len(records)
        )
        return records

    async def list_records(
        self,
        locale: Optional[Locale] = None,
        namespace: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[TranslationRecord]:
        if locale is not None:
            records = await self.query_records_by_locale(locale)
        else:
            result = await asyncio.to_thread(self._client.scan, self.table_name)
            records = self._to_records(self._unwrap(result, "scan") or [])
        return filter_records(records, namespace=namespace, search=search)

    async def get_record(self, locale: Locale, key: str) -> Optional[TranslationRecord]:
        result = await asyncio.to_thread(
            self._client.get_item,
            self.table_name,
            Key=self._key(locale, key),
        )
        response = self._unwrap(result, "get_item") or {}
        item = response.get("Item")
        return self._to_record(item) if item else None

    async def upsert_record(self, record: TranslationRecord) -> TranslationRecord:
        now = _utc_now()
        result = await asyncio.to_thread(
            self._client.update_item,
            self.table_name,
            Key=self._key(record.locale, record.key),
            UpdateExpression=(
                "SET #value = :value, #namespace = :namespace, "
                "updated_at = :now, created_at = if_not_exists(created_at, :now)"
            ),
            ExpressionAttributeNames={"#value": "value", "#namespace": "namespace"},
            ExpressionAttributeValues={
                ":value": _serializer.serialize(record.value),
                ":namespace": _serializer.serialize(record.namespace),
                ":now": _serializer.serialize(now),
            },
            ReturnValues="ALL_NEW",
        )
        response = self._unwrap(result, "update_item") or {}
        stored = self._to_record(response.get("Attributes") or {})
        self._logger.info(
            "translation_record_upserted", locale=record.locale.value, key=record.key
        )
        if stored is None:
            return TranslationRecord(
                key=record.key,
                locale=record.locale,
                value=record.value,
                namespace=record.namespace,
                created_at=record.created_at or now,
                updated_at=now,
            )
        return stored

    async def delete_record(self, locale: Locale, key: str) -> bool:
        result = await asyncio.to_thread(
            self._client.delete_item,
            self.table_name,
            Key=self._key(locale, key),
            ReturnValues="ALL_OLD",
        )
        response = self._unwrap(result, "delete_item") or {}
        deleted = bool(response.get("Attributes"))
        self._logger.info(
            "translation_record_deleted",
            locale=locale.value,
            key=key,
            deleted=deleted,
        )
        return deleted


class InMemoryTranslationStore(TranslationStore):
    """Dict-backed store for tests and local development.

    Data does not survive a restart.
    """

    def __init__(self, records: Optional[Iterable[TranslationRecord]] = None):
        self._records: Dict[tuple[str, str], TranslationRecord] = {}
        for record in records or []:
            self._records[(record.locale.value, record.key)] = record

    async def query_records_by_locale(self, locale: Locale) -> List[TranslationRecord]:
        return [
            record for record in self._records.values() if record.locale == locale
        ]

    async def list_records(
        self,
        locale: Optional[Locale] = None,
        namespace: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[TranslationRecord]:
        records = self._records.values()
        if locale is not None:
            records = await self.query_records_by_locale(locale)
        return filter_records(records, namespace=namespace, search=search)

    async def get_record(self, locale: Locale, key: str) -> Optional[TranslationRecord]:
        return self._records.get((locale.value, key))

    async def upsert_record(self, record: TranslationRecord) -> TranslationRecord:
        now = _utc_now()
        existing = self._records.get((record.locale.value, record.key))
        stored = TranslationRecord(
            key=record.key,
            locale=record.locale,
            value=record.value,
            namespace=record.namespace,
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        self._records[(record.locale.value, record.key)] = stored
        return stored

    async def delete_record(self, locale: Locale, key: str) -> bool:
        return self._records.pop((locale.value, key), None) is not None
