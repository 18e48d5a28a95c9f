"""Literal formatting and parameter helpers shared by construct renderers."""

from collections.abc import Iterable
from decimal import Decimal
from typing import Any

import numpy as np

from querygen.config.settings import get_settings
from querygen.data.table import Column, Table
from querygen.data.types import DataType
from querygen.errors import InvalidArgumentError
from querygen.keywords.catalog import KeywordCatalog
from querygen.tokens.models import DrawRecord, TokenInfo


def format_literal(value: Any, data_type: DataType) -> str:
    """SQL literal text for a generated value; identical in every dialect."""
    if data_type.is_boolean_type():
        return "TRUE" if value else "FALSE"
    if data_type.is_integer_type() or data_type.is_long_type():
        return str(int(value))
    if data_type.is_double_type():
        return repr(float(value))
    if data_type.is_decimal_type():
        return format(Decimal(value), "f")
    escaped = str(value).replace("'", "''")
    return f"'{escaped}'"


def no_draw(_info: TokenInfo, _table: Table, _catalog: KeywordCatalog, _rng: np.random.Generator) -> DrawRecord:
    """Draw for constructs that need no random values."""
    return DrawRecord()


def column_list(columns: Iterable[Column]) -> str:
    """Comma-separated column names."""
    return ", ".join(col.name for col in columns)


def get_count(info: TokenInfo, default: int = 1, allow_zero: bool = False) -> int:
    """Number of items a construct should render."""
    count = info.params.get("count", default)
    minimum = 0 if allow_zero else 1
    if not isinstance(count, int) or count < minimum:
        raise InvalidArgumentError(
            f"{info.token_type.value}: count must be an integer >= {minimum}, got {count!r}"
        )
    return count


def get_bound(info: TokenInfo, default: int | None = None) -> int:
    """Inclusive upper bound for integer-literal constructs.

    Falls back to ``default``, then to the configured default_count_bound.
    """
    if default is None:
        default = get_settings().default_count_bound
    bound = info.params.get("bound", default)
    if not isinstance(bound, int) or bound < 0:
        raise InvalidArgumentError(
            f"{info.token_type.value}: bound must be a non-negative integer, got {bound!r}"
        )
    return bound


def get_types(info: TokenInfo, eligible: Iterable[DataType] | None = None) -> frozenset[DataType] | None:
    """Column types a construct may use: the ``types`` param narrowed to ``eligible``.

    Returns None when neither restricts the choice.
    """
    requested = info.params.get("types")
    if requested is None:
        return frozenset(eligible) if eligible is not None else None
    try:
        types = frozenset(DataType(t) for t in requested)
    except ValueError as e:
        raise InvalidArgumentError(f"{info.token_type.value}: {e}") from e
    if eligible is not None:
        types &= frozenset(eligible)
    return types
