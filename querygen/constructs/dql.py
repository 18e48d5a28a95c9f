"""Query constructs: projections, sources, grouping, windows, ordering, limits."""

from __future__ import annotations

import numpy as np

from querygen.config.constants import (
    KEYWORD_ASC,
    KEYWORD_DESC,
    KEYWORD_ORDER_BY,
    KEYWORD_PARTITION_BY,
    TokenType,
)
from querygen.constructs.common import column_list, get_bound, get_count, get_types, no_draw
from querygen.constructs.registry import ConstructRenderer, RenderContext, register
from querygen.data.table import Table
from querygen.errors import DisabledKeywordError
from querygen.keywords.catalog import KeywordCatalog, resolve_enabled
from querygen.tokens.models import DrawRecord, TokenInfo
from querygen.utils.randomness import get_random_element, get_random_integer


def _draw_columns(info: TokenInfo, table: Table, _catalog: KeywordCatalog, rng: np.random.Generator) -> DrawRecord:
    columns = table.get_random_columns(get_types(info), get_count(info), rng)
    return DrawRecord(columns=tuple(columns))


def _render_columns(draw: DrawRecord, _ctx: RenderContext) -> str:
    return column_list(draw.columns)


def draw_select_exp(info: TokenInfo, table: Table, catalog: KeywordCatalog, rng: np.random.Generator) -> DrawRecord:
    """Projected columns; none when every column is selected."""
    # count == 0 selects every column
    if get_count(info, allow_zero=True) == 0:
        return DrawRecord()
    return _draw_columns(info, table, catalog, rng)


def render_select_exp(draw: DrawRecord, _ctx: RenderContext) -> str:
    """Column list, or ``*`` when no columns were drawn."""
    return column_list(draw.columns) if draw.columns else "*"


def render_from_item(_draw: DrawRecord, ctx: RenderContext) -> str:
    """Table reference of the query source."""
    return ctx.table.name


def draw_window_exp(info: TokenInfo, table: Table, _catalog: KeywordCatalog, rng: np.random.Generator) -> DrawRecord:
    """Pick the partitioning and ordering columns of the window."""
    types = get_types(info)
    partition_column = table.get_random_columns(types, 1, rng)
    order_column = table.get_random_columns(types, 1, rng)
    return DrawRecord(columns=tuple(partition_column), secondary_columns=tuple(order_column))


def render_window_exp(draw: DrawRecord, ctx: RenderContext) -> str:
    """``(PARTITION BY <col> ORDER BY <col>)`` with dialect-resolved keywords."""
    partition_by = resolve_enabled(ctx.catalog, KEYWORD_PARTITION_BY, ctx.dialect)
    order_by = resolve_enabled(ctx.catalog, KEYWORD_ORDER_BY, ctx.dialect)
    return (
        f"({partition_by} {column_list(draw.columns)} "
        f"{order_by} {column_list(draw.secondary_columns)})"
    )


def draw_asc_desc(_info: TokenInfo, _table: Table, catalog: KeywordCatalog, rng: np.random.Generator) -> DrawRecord:
    """Pick one of the enabled sort direction keywords."""
    candidates = [kw for kw in (KEYWORD_ASC, KEYWORD_DESC) if catalog.is_enabled(kw)]
    if not candidates:
        raise DisabledKeywordError(
            f"{KEYWORD_ASC}/{KEYWORD_DESC}", "Neither sort direction keyword is enabled"
        )
    return DrawRecord(keyword=get_random_element(candidates, rng))


def render_asc_desc(draw: DrawRecord, ctx: RenderContext) -> str:
    """Sort direction keyword in the target dialect."""
    return resolve_enabled(ctx.catalog, draw.keyword, ctx.dialect)


def _draw_bounded_integer(info: TokenInfo, _table: Table, _catalog: KeywordCatalog, rng: np.random.Generator) -> DrawRecord:
    """Integer in [0, bound] for LIMIT / OFFSET style constructs."""
    return DrawRecord(number=get_random_integer(get_bound(info), rng))


def _render_number(draw: DrawRecord, _ctx: RenderContext) -> str:
    return str(draw.number)


register(TokenType.SELECT_EXP, ConstructRenderer(draw=draw_select_exp, render=render_select_exp))
register(TokenType.FROM_ITEM, ConstructRenderer(draw=no_draw, render=render_from_item))
register(TokenType.GROUP_EXP, ConstructRenderer(draw=_draw_columns, render=_render_columns))
register(TokenType.WINDOW_EXP, ConstructRenderer(draw=draw_window_exp, render=render_window_exp))
register(TokenType.ORDER_EXP, ConstructRenderer(draw=_draw_columns, render=_render_columns))
register(TokenType.ASC_DESC, ConstructRenderer(draw=draw_asc_desc, render=render_asc_desc))
register(TokenType.COUNT, ConstructRenderer(draw=_draw_bounded_integer, render=_render_number))
register(TokenType.SKIP_ROWS, ConstructRenderer(draw=_draw_bounded_integer, render=_render_number))
