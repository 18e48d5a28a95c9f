"""Construct renderer registry -- dispatch by token type.

Each TokenType registers a draw function (pulls random values once per
TokenInfo) and a render function (turns those values into dialect text).
Unregistered token types fail with UnsupportedConstructError.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from querygen.config.constants import Dialect, TokenType
from querygen.errors import UnsupportedConstructError

if TYPE_CHECKING:
    import numpy as np

    from querygen.data.table import Table
    from querygen.keywords.catalog import KeywordCatalog
    from querygen.tokens.models import DrawRecord, TokenInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderContext:
    """Everything a renderer may read besides the draw record."""

    info: TokenInfo
    table: Table
    catalog: KeywordCatalog
    dialect: Dialect


@dataclass(frozen=True)
class ConstructRenderer:
    """Draw and render functions for one token type."""

    draw: Callable[[TokenInfo, Table, KeywordCatalog, np.random.Generator], DrawRecord]
    """(info, table, catalog, rng) -> values shared by every dialect."""

    render: Callable[[DrawRecord, RenderContext], str]
    """(draw, context) -> dialect text."""


_REGISTRY: dict[TokenType, ConstructRenderer] = {}


def register(token_type: TokenType, renderer: ConstructRenderer) -> None:
    """Register the renderer for a token type."""
    _REGISTRY[token_type] = renderer
    logger.debug("Registered construct renderer for token_type=%s", token_type.value)


def get_renderer(token_type: TokenType) -> ConstructRenderer:
    """Get the renderer for a token type.

    Raises:
        UnsupportedConstructError: If nothing is registered for it.
    """
    renderer = _REGISTRY.get(token_type)
    if renderer is None:
        name = getattr(token_type, "value", token_type)
        raise UnsupportedConstructError(f"No renderer registered for token type '{name}'")
    return renderer


def registered_token_types() -> frozenset[TokenType]:
    return frozenset(_REGISTRY)
