"""Token value objects."""

from dataclasses import dataclass, field
from typing import Any

from querygen.config.constants import Dialect, TokenType
from querygen.data.table import Column


@dataclass(frozen=True)
class TokenInfo:
    """One construct of a statement template and the parameters to render it."""

    token_type: TokenType
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def placeholder(self) -> str:
        return self.token_type.placeholder


@dataclass(frozen=True)
class Token:
    """A construct rendered for one dialect."""

    text: str
    token_type: TokenType
    dialect: Dialect

    @property
    def placeholder(self) -> str:
        return self.token_type.placeholder


@dataclass(frozen=True)
class DrawRecord:
    """Random values drawn once per TokenInfo and shared by every dialect render."""

    columns: tuple[Column, ...] = ()
    secondary_columns: tuple[Column, ...] = ()
    values: tuple[Any, ...] = ()
    operator: str | None = None
    keyword: str | None = None
    number: int | None = None
