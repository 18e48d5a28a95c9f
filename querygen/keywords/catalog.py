"""Keyword catalog: abstract keyword + dialect -> surface text."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from querygen.config.constants import DIALECTS, Dialect
from querygen.data.types import DataType
from querygen.errors import DisabledKeywordError, UnmappedKeywordError
from querygen.keywords.models import DataTypeMapping, KeywordMapping

logger = logging.getLogger(__name__)


@runtime_checkable
class KeywordCatalog(Protocol):
    """What the generator needs from a keyword mapping table."""

    def is_enabled(self, keyword: str) -> bool: ...

    def resolve(self, keyword: str, dialect: Dialect, variant: int = 0) -> str: ...

    def resolve_data_type(self, data_type: DataType, dialect: Dialect) -> str: ...

    def variants(self, keyword: str) -> tuple[KeywordMapping, ...]: ...


class MappedKeywordCatalog:
    """Immutable, validated-at-construction keyword catalog.

    Every enabled keyword must have at least one variant, and every variant
    must carry text for every supported dialect. Violations raise
    UnmappedKeywordError here rather than at render time.
    """

    def __init__(
        self,
        features: Mapping[str, Sequence[KeywordMapping]],
        enabled: Iterable[str],
        data_types: Iterable[DataTypeMapping] = (),
        dialects: Sequence[Dialect] = DIALECTS,
    ):
        self._dialects = tuple(dialects)
        self._features: Mapping[str, tuple[KeywordMapping, ...]] = MappingProxyType(
            {name: tuple(mappings) for name, mappings in features.items()}
        )
        self._enabled = frozenset(enabled)
        self._data_types: Mapping[DataType, DataTypeMapping] = MappingProxyType(
            {mapping.data_type: mapping for mapping in data_types}
        )
        self._validate()
        logger.info(
            "Keyword catalog ready: %s feature(s), %s enabled, %s data type(s)",
            len(self._features),
            len(self._enabled),
            len(self._data_types),
        )

    def _validate(self) -> None:
        for keyword in sorted(self._enabled):
            mappings = self._features.get(keyword)
            if not mappings:
                raise UnmappedKeywordError(keyword, f"Enabled keyword '{keyword}' has no mapping")
            for index, mapping in enumerate(mappings):
                for dialect in self._dialects:
                    if not mapping.for_dialect(dialect):
                        raise UnmappedKeywordError(
                            keyword,
                            f"Keyword '{keyword}' variant {index} has no {dialect.value} mapping",
                        )
        for data_type, mapping in self._data_types.items():
            for dialect in self._dialects:
                if not mapping.for_dialect(dialect):
                    raise UnmappedKeywordError(
                        data_type.value,
                        f"Data type '{data_type.value}' has no {dialect.value} mapping",
                    )

    @property
    def enabled_keywords(self) -> frozenset[str]:
        return self._enabled

    @property
    def dialects(self) -> tuple[Dialect, ...]:
        return self._dialects

    def is_enabled(self, keyword: str) -> bool:
        return keyword in self._enabled

    def variants(self, keyword: str) -> tuple[KeywordMapping, ...]:
        """All variants of an enabled keyword."""
        if not self.is_enabled(keyword):
            raise DisabledKeywordError(keyword, f"Keyword '{keyword}' is not enabled")
        return self._features[keyword]

    def resolve(self, keyword: str, dialect: Dialect, variant: int = 0) -> str:
        """Surface text of ``keyword`` in ``dialect``.

        Raises:
            DisabledKeywordError: If the keyword is not enabled.
            UnmappedKeywordError: If the keyword, variant or dialect has no mapping.
        """
        mappings = self.variants(keyword)
        if not 0 <= variant < len(mappings):
            raise UnmappedKeywordError(
                keyword, f"Keyword '{keyword}' has no variant {variant}"
            )
        if dialect not in self._dialects:
            raise UnmappedKeywordError(
                keyword, f"Keyword '{keyword}' has no {dialect.value} mapping"
            )
        return mappings[variant].for_dialect(dialect)

    def resolve_data_type(self, data_type: DataType, dialect: Dialect) -> str:
        """Type keyword of ``data_type`` in ``dialect``.

        Raises:
            UnmappedKeywordError: If the data type has no mapping.
        """
        mapping = self._data_types.get(data_type)
        if mapping is None or dialect not in self._dialects:
            raise UnmappedKeywordError(
                data_type.value,
                f"Data type '{data_type.value}' has no {dialect.value} mapping",
            )
        return mapping.for_dialect(dialect)


def resolve_enabled(catalog: KeywordCatalog, keyword: str, dialect: Dialect, variant: int = 0) -> str:
    """Check enablement, then resolve. Never falls back to a default lexeme."""
    if not catalog.is_enabled(keyword):
        raise DisabledKeywordError(keyword, f"Keyword '{keyword}' is not enabled")
    return catalog.resolve(keyword, dialect, variant)
