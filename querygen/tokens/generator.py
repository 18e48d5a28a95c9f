"""Token generator: renders each construct once per dialect from a single draw."""

import logging
from collections.abc import Iterable, Sequence

import numpy as np

from querygen.config.constants import DIALECTS, Dialect
from querygen.constructs import RenderContext, get_renderer
from querygen.data.table import Table
from querygen.keywords.catalog import KeywordCatalog
from querygen.tokens.models import DrawRecord, Token, TokenInfo
from querygen.utils.randomness import get_rng

logger = logging.getLogger(__name__)


class TokenGenerator:
    """Renders TokenInfo values against a borrowed Table and KeywordCatalog.

    Random values are drawn once per TokenInfo and reused for every dialect,
    so the dialect outputs describe the same logical statement.

    ``default_bound`` is the upper bound for count/skip_rows tokens that carry
    no ``bound`` param; when None the configured default_count_bound applies.
    """

    def __init__(
        self,
        table: Table,
        catalog: KeywordCatalog,
        rng: np.random.Generator | None = None,
        dialects: Sequence[Dialect] = DIALECTS,
        default_bound: int | None = None,
    ):
        self.table = table
        self.catalog = catalog
        self.rng = rng if rng is not None else get_rng()
        self.dialects = tuple(dialects)
        self.default_bound = default_bound

    def _table_for(self, info: TokenInfo) -> Table:
        return info.params.get("table") or self.table

    def _with_defaults(self, info: TokenInfo) -> TokenInfo:
        """Fill in generator-level defaults the token does not set itself."""
        if self.default_bound is None or "bound" in info.params:
            return info
        return TokenInfo(info.token_type, {**info.params, "bound": self.default_bound})

    def draw(self, info: TokenInfo) -> DrawRecord:
        """Draw the random values for one construct."""
        renderer = get_renderer(info.token_type)
        return renderer.draw(self._with_defaults(info), self._table_for(info), self.catalog, self.rng)

    def render(self, info: TokenInfo, draw: DrawRecord, dialect: Dialect) -> Token:
        """Render one construct for one dialect from an existing draw."""
        renderer = get_renderer(info.token_type)
        ctx = RenderContext(
            info=info,
            table=self._table_for(info),
            catalog=self.catalog,
            dialect=dialect,
        )
        return Token(text=renderer.render(draw, ctx), token_type=info.token_type, dialect=dialect)

    def generate_token(self, info: TokenInfo) -> dict[Dialect, Token]:
        """Render one construct for every dialect.

        Raises:
            GenerationError: If the construct cannot be generated for this table
                or catalog. Nothing is rendered for any dialect in that case.
        """
        draw = self.draw(info)
        tokens = {dialect: self.render(info, draw, dialect) for dialect in self.dialects}
        logger.debug(
            "Rendered %s: %s",
            info.token_type.value,
            {dialect.value: token.text for dialect, token in tokens.items()},
        )
        return tokens

    def generate_tokens(self, infos: Iterable[TokenInfo]) -> list[dict[Dialect, Token]]:
        return [self.generate_token(info) for info in infos]
