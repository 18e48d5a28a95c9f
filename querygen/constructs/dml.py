"""Data manipulation constructs: inserted rows, assignments, predicates."""

from __future__ import annotations

import numpy as np

from querygen.config.constants import COMPARISON_OPERATORS, EQUALITY_OPERATORS, TokenType
from querygen.constructs.common import format_literal, get_types
from querygen.constructs.registry import ConstructRenderer, RenderContext, register
from querygen.data.generators import generate_value
from querygen.data.table import Table
from querygen.data.types import DataType
from querygen.errors import NoEligibleColumnError
from querygen.keywords.catalog import KeywordCatalog
from querygen.tokens.models import DrawRecord, TokenInfo
from querygen.utils.randomness import get_random_element


def operators_for(column_type: DataType) -> tuple[str, ...]:
    """Comparison operators valid for a column type in both dialects."""
    if column_type.is_boolean_type():
        return EQUALITY_OPERATORS
    return COMPARISON_OPERATORS


def draw_insert_exp(_info: TokenInfo, table: Table, _catalog: KeywordCatalog, rng: np.random.Generator) -> DrawRecord:
    """One generated value per column, in schema order."""
    if not table.schema:
        raise NoEligibleColumnError(f"Table '{table.name}' has no columns to insert into")
    return DrawRecord(columns=table.schema, values=tuple(table.generate_row(rng)))


def render_insert_exp(draw: DrawRecord, _ctx: RenderContext) -> str:
    """``(v1, v2, ...)`` literal row."""
    literals = [format_literal(value, col.data_type) for col, value in zip(draw.columns, draw.values)]
    return f"({', '.join(literals)})"


def draw_update_item(info: TokenInfo, table: Table, _catalog: KeywordCatalog, rng: np.random.Generator) -> DrawRecord:
    """Pick the assigned column and its new value."""
    column = table.get_random_columns(get_types(info), 1, rng)[0]
    return DrawRecord(columns=(column,), values=(generate_value(column.data_type, rng),))


def render_update_item(draw: DrawRecord, _ctx: RenderContext) -> str:
    """``col = literal``."""
    column = draw.columns[0]
    return f"{column.name} = {format_literal(draw.values[0], column.data_type)}"


def draw_condition(info: TokenInfo, table: Table, _catalog: KeywordCatalog, rng: np.random.Generator) -> DrawRecord:
    """Pick a column, an operator valid for its type, and a comparison value."""
    column = table.get_random_columns(get_types(info), 1, rng)[0]
    operator = get_random_element(operators_for(column.data_type), rng)
    value = generate_value(column.data_type, rng)
    return DrawRecord(columns=(column,), values=(value,), operator=operator)


def render_condition(draw: DrawRecord, _ctx: RenderContext) -> str:
    """``col op literal``."""
    column = draw.columns[0]
    return f"{column.name} {draw.operator} {format_literal(draw.values[0], column.data_type)}"


register(TokenType.INSERT_EXP, ConstructRenderer(draw=draw_insert_exp, render=render_insert_exp))
register(TokenType.UPDATE_ITEM, ConstructRenderer(draw=draw_update_item, render=render_update_item))
register(TokenType.CONDITION, ConstructRenderer(draw=draw_condition, render=render_condition))
