"""Errors raised by the translation pipeline."""


class TranslationError(Exception):
    """Base class for translation pipeline errors."""


class StoreUnavailableError(TranslationError):
    """The translation store could not be reached or rejected the request.

    Attributes:
        error_code: Machine error code reported by the backend, if any.
    """

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        self.error_code = error_code


class BundleMissingError(TranslationError, FileNotFoundError):
    """No static message bundle is registered for the requested locale."""


class UnsupportedLocaleError(TranslationError, ValueError):
    """A locale code outside the supported set was given."""


class RecordNotFoundError(TranslationError, LookupError):
    """A translation record does not exist for the given (locale, key)."""


class RecordConflictError(TranslationError):
    """A translation record already exists for the target (locale, key)."""
