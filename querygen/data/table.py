"""Table schema and sample data generation."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np

from querygen.config.constants import DEFAULT_STRING_LENGTH
from querygen.data.generators import generate_column
from querygen.data.types import DataType
from querygen.errors import InvalidArgumentError, NoEligibleColumnError
from querygen.utils.randomness import (
    get_random_element,
    get_random_sample,
    get_random_string,
    get_rng,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Column:
    """A named, typed column of a table."""

    name: str
    data_type: DataType


class Table:
    """A data table: name, ordered schema, and row count."""

    def __init__(self, name: str, row_count: int = 0):
        if row_count < 0:
            raise InvalidArgumentError(f"Row count cannot be negative, got {row_count}")
        self.name = name
        self._row_count = row_count
        self._columns: list[Column] = []

    def __repr__(self) -> str:
        return f"Table(name={self.name!r}, columns={len(self._columns)}, row_count={self._row_count})"

    @property
    def row_count(self) -> int:
        return self._row_count

    @row_count.setter
    def row_count(self, value: int) -> None:
        if value < 0:
            raise InvalidArgumentError(f"Row count cannot be negative, got {value}")
        self._row_count = value

    @property
    def schema(self) -> tuple[Column, ...]:
        return tuple(self._columns)

    @property
    def column_names(self) -> list[str]:
        return [col.name for col in self._columns]

    def add_column(self, name: str, data_type: DataType) -> Column:
        """Append a column to the schema.

        Raises:
            InvalidArgumentError: If a column with the same name already exists.
        """
        if any(col.name == name for col in self._columns):
            raise InvalidArgumentError(f"Column '{name}' already exists in table '{self.name}'")
        column = Column(name=name, data_type=data_type)
        self._columns.append(column)
        return column

    def get_column(self, name: str) -> Column | None:
        for col in self._columns:
            if col.name == name:
                return col
        return None

    def columns_of_types(self, types: Iterable[DataType] | None = None) -> list[Column]:
        """Columns in schema order, optionally restricted to the given types."""
        if types is None:
            return list(self._columns)
        allowed = set(types)
        return [col for col in self._columns if col.data_type in allowed]

    def get_random_column(
        self,
        data_type: DataType | None = None,
        rng: np.random.Generator | None = None,
    ) -> str:
        """Name of a uniformly chosen column, optionally of a given type.

        Raises:
            NoEligibleColumnError: If no column matches.
        """
        types = None if data_type is None else [data_type]
        return self.get_random_columns(types, 1, rng)[0].name

    def get_random_columns(
        self,
        types: Iterable[DataType] | None,
        count: int,
        rng: np.random.Generator | None = None,
    ) -> list[Column]:
        """``count`` distinct columns whose type is in ``types``.

        Raises:
            NoEligibleColumnError: If fewer than ``count`` columns are eligible.
        """
        candidates = self.columns_of_types(types)
        if len(candidates) < count or not candidates:
            raise NoEligibleColumnError(
                f"Table '{self.name}' has {len(candidates)} eligible column(s), {count} required"
            )
        return get_random_sample(candidates, count, rng)

    def generate_column(
        self,
        row_count: int,
        data_type: DataType,
        rng: np.random.Generator | None = None,
    ) -> list[Any]:
        return generate_column(row_count, data_type, rng)

    def generate_row(self, rng: np.random.Generator | None = None) -> list[Any]:
        """One value per column, in schema order."""
        rng = rng if rng is not None else get_rng()
        return [generate_column(1, col.data_type, rng)[0] for col in self._columns]

    def generate_data(
        self,
        row_count: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> list[list[Any]]:
        """Sample data, one independently generated column per schema entry.

        Args:
            row_count: Rows per column. Defaults to the table's row count.
            rng: Random generator. Defaults to the process-wide generator.

        Returns:
            Column-major data: ``data[i]`` holds the values of ``schema[i]``.
        """
        if row_count is None:
            row_count = self._row_count
        rng = rng if rng is not None else get_rng()
        return [generate_column(row_count, col.data_type, rng) for col in self._columns]


def generate_random_table(
    column_count: int,
    row_count: int = 0,
    rng: np.random.Generator | None = None,
    name_length: int = DEFAULT_STRING_LENGTH,
    name: str | None = None,
) -> Table:
    """Build a table with random identifier-safe names and random column types."""
    if column_count <= 0:
        raise InvalidArgumentError(f"Column count must be positive, got {column_count}")
    rng = rng if rng is not None else get_rng()

    table = Table(name or get_random_string(name_length, rng), row_count=row_count)
    data_types = list(DataType)
    while len(table.schema) < column_count:
        column_name = get_random_string(name_length, rng)
        if table.get_column(column_name) is not None:
            continue
        table.add_column(column_name, get_random_element(data_types, rng))

    logger.debug("Generated random table %s", table)
    return table
