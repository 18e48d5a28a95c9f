"""Token value objects."""

from querygen.tokens.models import DrawRecord, Token, TokenInfo

__all__ = ["DrawRecord", "Token", "TokenInfo"]
