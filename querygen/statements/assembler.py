"""Statement assembler: joins rendered tokens into skeleton and tokenized text."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from querygen.config.constants import DIALECTS, Dialect
from querygen.errors import InvalidArgumentError
from querygen.keywords.catalog import KeywordCatalog, resolve_enabled
from querygen.statements.template import Keyword, Literal, StatementTemplate
from querygen.tokens.models import Token, TokenInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedStatement:
    """One statement in one dialect, as skeleton and tokenized text."""

    dialect: Dialect
    skeleton_parts: tuple[str, ...]
    tokenized_parts: tuple[str, ...]
    separator: str = " "
    terminator: str = ";"

    @property
    def skeleton(self) -> str:
        return self.separator.join(self.skeleton_parts) + self.terminator

    @property
    def tokenized(self) -> str:
        return self.separator.join(self.tokenized_parts) + self.terminator


class StatementAssembler:
    """Builds per-dialect skeleton/tokenized statements from a template."""

    def __init__(self, catalog: KeywordCatalog, dialects: Sequence[Dialect] = DIALECTS):
        self.catalog = catalog
        self.dialects = tuple(dialects)

    def assemble(
        self,
        template: StatementTemplate,
        rendered: Sequence[dict[Dialect, Token]],
    ) -> dict[Dialect, RenderedStatement]:
        """Join template keywords, literals and rendered tokens per dialect.

        Args:
            template: The abstract statement.
            rendered: One ``{dialect: Token}`` entry per TokenInfo of the
                template, in template order.

        Returns:
            One RenderedStatement per dialect. Skeleton and tokenized parts
            always have the same length and construct order.

        Raises:
            InvalidArgumentError: If ``rendered`` does not line up with the template.
            DisabledKeywordError / UnmappedKeywordError: If a keyword cannot be resolved.
        """
        infos = template.token_infos
        if len(infos) != len(rendered):
            raise InvalidArgumentError(
                f"Template has {len(infos)} construct(s) but {len(rendered)} were rendered"
            )

        return {
            dialect: self._assemble_dialect(template, rendered, dialect)
            for dialect in self.dialects
        }

    def _assemble_dialect(
        self,
        template: StatementTemplate,
        rendered: Sequence[dict[Dialect, Token]],
        dialect: Dialect,
    ) -> RenderedStatement:
        skeleton: list[str] = []
        tokenized: list[str] = []
        tokens = iter(rendered)

        for element in template.elements:
            if isinstance(element, Keyword):
                text = resolve_enabled(self.catalog, element.name, dialect, element.variant)
                skeleton.append(text)
                tokenized.append(text)
            elif isinstance(element, Literal):
                skeleton.append(element.text)
                tokenized.append(element.text)
            elif isinstance(element, TokenInfo):
                token = next(tokens)[dialect]
                if token.token_type is not element.token_type:
                    raise InvalidArgumentError(
                        f"Expected a {element.token_type.value} token, got {token.token_type.value}"
                    )
                skeleton.append(token.placeholder)
                tokenized.append(token.text)

        return RenderedStatement(
            dialect=dialect,
            skeleton_parts=tuple(skeleton),
            tokenized_parts=tuple(tokenized),
            separator=template.separator,
            terminator=template.terminator,
        )
