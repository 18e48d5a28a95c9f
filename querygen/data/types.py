"""Column data types and their generation ranges."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

import numpy as np

from querygen.config.constants import Dialect


class StorageClass(str, Enum):
    """In-memory representation used when generating values."""

    INTEGER = "integer"
    LONG = "long"
    DOUBLE = "double"
    DECIMAL = "decimal"
    STRING = "string"
    BOOLEAN = "boolean"


_INT16 = np.iinfo(np.int16)
_INT32 = np.iinfo(np.int32)
_INT64 = np.iinfo(np.int64)
FLOAT32_MAX = float(np.finfo(np.float32).max)
FLOAT64_MAX = float(np.finfo(np.float64).max)

# Above double precision while staying inside typical engine limits
DECIMAL_BOUND = Decimal("5E+53")


@dataclass(frozen=True)
class TypeSpec:
    """Generation metadata for a DataType."""

    storage_class: StorageClass
    low: int | float | Decimal | None = None
    high: int | float | Decimal | None = None
    serial: bool = False
    fixed_value: str | None = None


class DataType(str, Enum):
    """Supported column types."""

    SMALL_INT = "small_int"
    INTEGER = "integer"
    BIG_INT = "big_int"
    SMALL_SERIAL = "small_serial"
    SERIAL = "serial"
    BIG_SERIAL = "big_serial"
    REAL = "real"
    BIG_REAL = "big_real"
    DECIMAL = "decimal"
    NUMERIC = "numeric"
    BOOL = "bool"
    STR = "str"
    BYTES = "bytes"
    DATE = "date"
    TIME = "time"
    TIMESTAMP = "timestamp"

    @property
    def spec(self) -> TypeSpec:
        """Range and storage metadata for this type."""
        return _TYPE_SPECS[self]

    @property
    def storage_class(self) -> StorageClass:
        """How values of this type are generated and formatted."""
        return _TYPE_SPECS[self].storage_class

    @property
    def low(self) -> int | float | Decimal | None:
        """Inclusive lower bound, or None for non-numeric types."""
        return _TYPE_SPECS[self].low

    @property
    def high(self) -> int | float | Decimal | None:
        """Inclusive upper bound, or None for non-numeric types."""
        return _TYPE_SPECS[self].high

    def is_integer_type(self) -> bool:
        """16/32-bit integers and their serial variants."""
        return self.storage_class is StorageClass.INTEGER

    def is_long_type(self) -> bool:
        """64-bit integers."""
        return self.storage_class is StorageClass.LONG

    def is_double_type(self) -> bool:
        """Single and double precision floats."""
        return self.storage_class is StorageClass.DOUBLE

    def is_decimal_type(self) -> bool:
        """Fixed-point types generated as decimal.Decimal."""
        return self.storage_class is StorageClass.DECIMAL

    def is_string_type(self) -> bool:
        """Types rendered as quoted strings, temporals included."""
        return self.storage_class is StorageClass.STRING

    def is_boolean_type(self) -> bool:
        return self.storage_class is StorageClass.BOOLEAN

    def is_temporal_type(self) -> bool:
        """Date, time and timestamp."""
        return self in (DataType.DATE, DataType.TIME, DataType.TIMESTAMP)


_TYPE_SPECS: dict[DataType, TypeSpec] = {
    DataType.SMALL_INT: TypeSpec(StorageClass.INTEGER, int(_INT16.min), int(_INT16.max)),
    DataType.INTEGER: TypeSpec(StorageClass.INTEGER, int(_INT32.min), int(_INT32.max)),
    DataType.SMALL_SERIAL: TypeSpec(StorageClass.INTEGER, 0, int(_INT16.max), serial=True),
    DataType.SERIAL: TypeSpec(StorageClass.INTEGER, 0, int(_INT32.max), serial=True),
    DataType.BIG_INT: TypeSpec(StorageClass.LONG, int(_INT64.min), int(_INT64.max)),
    DataType.BIG_SERIAL: TypeSpec(StorageClass.LONG, 0, int(_INT64.max), serial=True),
    DataType.REAL: TypeSpec(StorageClass.DOUBLE, -FLOAT32_MAX, FLOAT32_MAX),
    DataType.BIG_REAL: TypeSpec(StorageClass.DOUBLE, -FLOAT64_MAX, FLOAT64_MAX),
    DataType.DECIMAL: TypeSpec(StorageClass.DECIMAL, -DECIMAL_BOUND, DECIMAL_BOUND),
    DataType.NUMERIC: TypeSpec(StorageClass.DECIMAL, -DECIMAL_BOUND, DECIMAL_BOUND),
    DataType.BOOL: TypeSpec(StorageClass.BOOLEAN),
    DataType.STR: TypeSpec(StorageClass.STRING),
    DataType.BYTES: TypeSpec(StorageClass.STRING),
    # TODO: replace fixed temporal literals with randomized dates/times
    DataType.DATE: TypeSpec(StorageClass.STRING, fixed_value="1999-01-01"),
    DataType.TIME: TypeSpec(StorageClass.STRING, fixed_value="04:05:06.789"),
    DataType.TIMESTAMP: TypeSpec(StorageClass.STRING, fixed_value="1999-01-08 04:05:06"),
}

# Column types each dialect accepts in PARTITION BY / CLUSTER BY
PARTITION_TYPES: dict[Dialect, frozenset[DataType]] = {
    Dialect.POSTGRES: frozenset(DataType),
    Dialect.BIGQUERY: frozenset({DataType.DATE, DataType.TIMESTAMP}),
}
CLUSTER_TYPES: dict[Dialect, frozenset[DataType]] = {
    Dialect.POSTGRES: frozenset(DataType),
    Dialect.BIGQUERY: frozenset(DataType)
    - {DataType.REAL, DataType.BIG_REAL, DataType.BYTES, DataType.TIME},
}


def eligible_in_all_dialects(per_dialect: dict[Dialect, frozenset[DataType]]) -> frozenset[DataType]:
    """Types accepted by every dialect, so one draw is valid for both renders."""
    return frozenset.intersection(*per_dialect.values())
