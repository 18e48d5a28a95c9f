"""Per-type random value generators."""

from collections.abc import Callable
from decimal import Decimal
from typing import Any

import numpy as np

from querygen.config.constants import DEFAULT_STRING_LENGTH
from querygen.data.types import DataType, StorageClass
from querygen.errors import InvalidArgumentError, TypeMismatchError
from querygen.utils.randomness import get_random_bit_string, get_random_string, get_rng


def _check_storage_class(data_type: DataType, expected: StorageClass) -> None:
    if data_type.storage_class is not expected:
        raise TypeMismatchError(
            f"{data_type.value} cannot be represented by a {expected.value} type"
        )


def _signed_draw(data_type: DataType, rng: np.random.Generator) -> int:
    spec = data_type.spec
    if not spec.serial:
        return int(rng.integers(spec.low, spec.high, endpoint=True, dtype=np.int64))
    # Serial types: absolute value of a signed draw of the same width;
    # the minimum has no positive counterpart and maps to 0.
    signed_low = -spec.high - 1
    value = int(rng.integers(signed_low, spec.high, endpoint=True, dtype=np.int64))
    return 0 if value == signed_low else abs(value)


def generate_integer_value(data_type: DataType, rng: np.random.Generator | None = None) -> int:
    """Random value for a 16/32-bit integer type."""
    _check_storage_class(data_type, StorageClass.INTEGER)
    return _signed_draw(data_type, rng if rng is not None else get_rng())


def generate_long_value(data_type: DataType, rng: np.random.Generator | None = None) -> int:
    """Random value for a 64-bit integer type."""
    _check_storage_class(data_type, StorageClass.LONG)
    return _signed_draw(data_type, rng if rng is not None else get_rng())


def generate_double_value(data_type: DataType, rng: np.random.Generator | None = None) -> float:
    """Random value uniform over the native single/double precision range."""
    _check_storage_class(data_type, StorageClass.DOUBLE)
    rng = rng if rng is not None else get_rng()
    # Scale [-1, 1) instead of low + (high - low) * u, which overflows for doubles
    return (2.0 * float(rng.random()) - 1.0) * data_type.high


def generate_decimal_value(data_type: DataType, rng: np.random.Generator | None = None) -> Decimal:
    """Random fixed-point value in ``[low, low + range)``."""
    _check_storage_class(data_type, StorageClass.DECIMAL)
    rng = rng if rng is not None else get_rng()
    low = data_type.low
    value_range = abs(low) * 2
    return low + value_range * Decimal(float(rng.random()))


def generate_string_value(
    data_type: DataType,
    rng: np.random.Generator | None = None,
    length: int = DEFAULT_STRING_LENGTH,
) -> str:
    """Random string, bit string, or the fixed temporal literal."""
    _check_storage_class(data_type, StorageClass.STRING)
    if data_type is DataType.STR:
        return get_random_string(length, rng)
    if data_type is DataType.BYTES:
        return get_random_bit_string(length, rng)
    return generate_temporal_value(data_type)


def generate_temporal_value(data_type: DataType) -> str:
    """Literal for date/time/timestamp columns.

    Fixed values for now; this is the single place to plug in randomized
    temporal generation.
    """
    if not data_type.is_temporal_type():
        raise TypeMismatchError(f"{data_type.value} is not a temporal type")
    return data_type.spec.fixed_value


def generate_boolean_value(data_type: DataType, rng: np.random.Generator | None = None) -> bool:
    _check_storage_class(data_type, StorageClass.BOOLEAN)
    rng = rng if rng is not None else get_rng()
    return bool(rng.integers(0, 2))


_GENERATORS: dict[StorageClass, Callable[..., Any]] = {
    StorageClass.INTEGER: generate_integer_value,
    StorageClass.LONG: generate_long_value,
    StorageClass.DOUBLE: generate_double_value,
    StorageClass.DECIMAL: generate_decimal_value,
    StorageClass.STRING: generate_string_value,
    StorageClass.BOOLEAN: generate_boolean_value,
}


def generate_value(data_type: DataType, rng: np.random.Generator | None = None) -> Any:
    """Random value for any DataType, dispatched by storage class."""
    return _GENERATORS[data_type.storage_class](data_type, rng)


def generate_column(
    row_count: int,
    data_type: DataType,
    rng: np.random.Generator | None = None,
) -> list[Any]:
    """Generate ``row_count`` independent values of ``data_type``.

    Raises:
        InvalidArgumentError: If row_count is negative.
    """
    if row_count < 0:
        raise InvalidArgumentError(f"Row count cannot be negative, got {row_count}")
    rng = rng if rng is not None else get_rng()
    generator = _GENERATORS[data_type.storage_class]
    return [generator(data_type, rng) for _ in range(row_count)]
