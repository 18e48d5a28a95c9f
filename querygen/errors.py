"""Generation errors.

Every error raised while building a statement derives from GenerationError
and is scoped to that statement: the batch generator catches it, logs it and
moves on (or aborts, depending on settings).
"""


class GenerationError(Exception):
    """Base class for statement-scoped generation failures."""


class InvalidArgumentError(GenerationError, ValueError):
    """A generator was asked for a negative bound, non-positive length, etc."""


class TypeMismatchError(GenerationError, TypeError):
    """A value generator was invoked for a DataType outside its storage class."""


class KeywordError(GenerationError, LookupError):
    """Keyword catalog lookup failure."""

    def __init__(self, keyword: str, message: str):
        super().__init__(message)
        self.keyword = keyword


class UnmappedKeywordError(KeywordError):
    """Keyword is enabled but has no mapping for the requested dialect."""


class DisabledKeywordError(KeywordError):
    """Keyword is not enabled in the catalog."""


class NoEligibleColumnError(GenerationError, LookupError):
    """The table has no column of the type or role a construct needs."""


class UnsupportedConstructError(GenerationError, ValueError):
    """No renderer is registered for a token type."""


class CatalogConfigError(ValueError):
    """Keyword or datatype configuration files are malformed."""
