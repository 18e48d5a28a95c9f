"""Table definition constructs: names, schemas, partitioning and clustering."""

from __future__ import annotations

import numpy as np

from querygen.config.constants import Dialect, TokenType
from querygen.constructs.common import column_list, get_count, get_types, no_draw
from querygen.constructs.registry import ConstructRenderer, RenderContext, register
from querygen.data.table import Table
from querygen.data.types import CLUSTER_TYPES, PARTITION_TYPES, DataType, eligible_in_all_dialects
from querygen.errors import NoEligibleColumnError
from querygen.keywords.catalog import KeywordCatalog
from querygen.tokens.models import DrawRecord, TokenInfo

PARTITIONABLE = eligible_in_all_dialects(PARTITION_TYPES)
CLUSTERABLE = eligible_in_all_dialects(CLUSTER_TYPES)


def render_table_name(_draw: DrawRecord, ctx: RenderContext) -> str:
    """Name of the bound table."""
    return ctx.table.name


def render_table_schema(_draw: DrawRecord, ctx: RenderContext) -> str:
    """``(col TYPE, ...)`` in schema order with the dialect's type keywords."""
    if not ctx.table.schema:
        raise NoEligibleColumnError(f"Table '{ctx.table.name}' has no columns")
    definitions = [
        f"{col.name} {ctx.catalog.resolve_data_type(col.data_type, ctx.dialect)}"
        for col in ctx.table.schema
    ]
    return f"({', '.join(definitions)})"


def draw_partition_exp(info: TokenInfo, table: Table, _catalog: KeywordCatalog, rng: np.random.Generator) -> DrawRecord:
    """Pick columns every dialect can partition by."""
    types = get_types(info, PARTITIONABLE)
    columns = table.get_random_columns(types, get_count(info), rng)
    return DrawRecord(columns=tuple(columns))


def render_partition_exp(draw: DrawRecord, ctx: RenderContext) -> str:
    if ctx.dialect is Dialect.POSTGRES:
        return f"RANGE ({column_list(draw.columns)})"
    # BigQuery partitions by DATE; timestamps are truncated to their date
    return ", ".join(
        f"DATE({col.name})" if col.data_type is DataType.TIMESTAMP else col.name
        for col in draw.columns
    )


def draw_cluster_exp(info: TokenInfo, table: Table, _catalog: KeywordCatalog, rng: np.random.Generator) -> DrawRecord:
    """Pick columns every dialect can cluster by."""
    types = get_types(info, CLUSTERABLE)
    columns = table.get_random_columns(types, get_count(info), rng)
    return DrawRecord(columns=tuple(columns))


def render_cluster_exp(draw: DrawRecord, _ctx: RenderContext) -> str:
    """Clustering columns as a plain list."""
    return column_list(draw.columns)


register(TokenType.TABLE_NAME, ConstructRenderer(draw=no_draw, render=render_table_name))
register(TokenType.TABLE_SCHEMA, ConstructRenderer(draw=no_draw, render=render_table_schema))
register(TokenType.PARTITION_EXP, ConstructRenderer(draw=draw_partition_exp, render=render_partition_exp))
register(TokenType.CLUSTER_EXP, ConstructRenderer(draw=draw_cluster_exp, render=render_cluster_exp))
