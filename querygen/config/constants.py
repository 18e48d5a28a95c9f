"""
Constants, enums, and static values.
"""

from enum import Enum


class Dialect(str, Enum):
    """Target SQL dialects."""

    POSTGRES = "postgres"
    BIGQUERY = "bigquery"


# Render order for every statement; Postgres first, BigQuery second.
DIALECTS: tuple[Dialect, ...] = (Dialect.POSTGRES, Dialect.BIGQUERY)


class TokenType(str, Enum):
    """Abstract statement constructs that the token generator can render."""

    TABLE_NAME = "table_name"
    TABLE_SCHEMA = "table_schema"
    PARTITION_EXP = "partition_exp"
    CLUSTER_EXP = "cluster_exp"
    INSERT_EXP = "insert_exp"
    UPDATE_ITEM = "update_item"
    CONDITION = "condition"
    SELECT_EXP = "select_exp"
    FROM_ITEM = "from_item"
    GROUP_EXP = "group_exp"
    WINDOW_EXP = "window_exp"
    ORDER_EXP = "order_exp"
    ASC_DESC = "asc_desc"
    COUNT = "count"
    SKIP_ROWS = "skip_rows"

    @property
    def placeholder(self) -> str:
        """Skeleton placeholder, e.g. ``<table_name>``."""
        return f"<{self.value}>"


# Keywords that renderers resolve directly (not through a template)
KEYWORD_ASC = "DQL_ASC"
KEYWORD_DESC = "DQL_DESC"
KEYWORD_PARTITION_BY = "DQL_PARTITION_BY"
KEYWORD_ORDER_BY = "DQL_ORDER_BY"

# Comparison operators valid in both dialects
COMPARISON_OPERATORS: tuple[str, ...] = ("=", "<>", "<", ">", "<=", ">=")
EQUALITY_OPERATORS: tuple[str, ...] = ("=", "<>")

DEFAULT_COUNT_BOUND = 100
DEFAULT_STRING_LENGTH = 20

# File names written by the directory output sink
OUTPUT_FILES: dict[str, str] = {
    "bigquery_skeletons": "bq_skeleton.txt",
    "bigquery_tokenized": "bq_tokenized.txt",
    "postgres_skeletons": "postgre_skeleton.txt",
    "postgres_tokenized": "postgre_tokenized.txt",
}
