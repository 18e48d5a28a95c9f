"""Schema model and random data generation."""

from querygen.data.generators import (
    generate_boolean_value,
    generate_column,
    generate_decimal_value,
    generate_double_value,
    generate_integer_value,
    generate_long_value,
    generate_string_value,
    generate_temporal_value,
    generate_value,
)
from querygen.data.table import Column, Table, generate_random_table
from querygen.data.types import (
    CLUSTER_TYPES,
    PARTITION_TYPES,
    DataType,
    StorageClass,
    eligible_in_all_dialects,
)

__all__ = [
    "CLUSTER_TYPES",
    "Column",
    "DataType",
    "PARTITION_TYPES",
    "StorageClass",
    "Table",
    "eligible_in_all_dialects",
    "generate_boolean_value",
    "generate_column",
    "generate_decimal_value",
    "generate_double_value",
    "generate_integer_value",
    "generate_long_value",
    "generate_random_table",
    "generate_string_value",
    "generate_temporal_value",
    "generate_value",
]
