from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from infrastructure.i18n.models import Locale

# Dot-delimited path with no empty or whitespace-containing segments
KEY_PATTERN = r"^[^.\s]+(\.[^.\s]+)*$"


def _normalize_locale(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


def _strip(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip()
    return value


class TranslationCreateRequest(BaseModel):
    """Schema for creating or replacing a translation record."""

    key: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            pattern=KEY_PATTERN,
            description="Dot-delimited message path",
            json_schema_extra={"example": "nav.aboutUs"},
        ),
    ]
    locale: Annotated[
        Locale,
        Field(..., description="Locale code", json_schema_extra={"example": "fr"}),
    ]
    value: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="Translated text",
            json_schema_extra={"example": "À propos"},
        ),
    ]
    namespace: Annotated[
        Optional[str],
        Field(
            default=None,
            description="Grouping label (defaults to the first key segment)",
            json_schema_extra={"example": "nav"},
        ),
    ] = None

    @field_validator("key", "namespace", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        return _strip(value)

    @field_validator("locale", mode="before")
    @classmethod
    def normalize_locale(cls, value: Any) -> Any:
        return _normalize_locale(value)


class TranslationUpdateRequest(BaseModel):
    """Schema for updating a translation record.

    Omitted fields keep their current value. Changing key or locale moves the
    record.
    """

    key: Annotated[
        Optional[str],
        Field(default=None, min_length=1, pattern=KEY_PATTERN),
    ] = None
    locale: Annotated[Optional[Locale], Field(default=None)] = None
    value: Annotated[Optional[str], Field(default=None, min_length=1)] = None
    namespace: Annotated[Optional[str], Field(default=None)] = None

    @field_validator("key", "namespace", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        return _strip(value)

    @field_validator("locale", mode="before")
    @classmethod
    def normalize_locale(cls, value: Any) -> Any:
        return _normalize_locale(value)


class CacheRequest(BaseModel):
    """Schema for cache clear and refresh requests."""

    locale: Annotated[
        Optional[Locale],
        Field(
            default=None,
            description="Locale to target; omit for every locale",
            json_schema_extra={"example": "fr"},
        ),
    ] = None

    @field_validator("locale", mode="before")
    @classmethod
    def normalize_locale(cls, value: Any) -> Any:
        return _normalize_locale(value)


class TranslationResponse(BaseModel):
    """Schema for a stored translation record."""

    key: str
    locale: Locale
    value: str
    namespace: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class TranslationEnvelope(BaseModel):
    message: Optional[str] = None
    data: TranslationResponse


class TranslationListEnvelope(BaseModel):
    message: Optional[str] = None
    data: List[TranslationResponse]


class MessageResponse(BaseModel):
    message: str


class RefreshResponse(BaseModel):
    """Schema for a refresh result; data is the fresh tree when a locale was given."""

    message: str
    locale: Optional[Locale] = None
    data: Optional[Dict[str, Any]] = None
    timestamp: int
