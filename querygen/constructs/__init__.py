"""Construct renderers -- one draw/render pair per token type."""

from querygen.constructs.registry import (
    ConstructRenderer,
    RenderContext,
    get_renderer,
    register,
    registered_token_types,
)

# Register all construct renderers on import.
import querygen.constructs.ddl  # noqa: F401
import querygen.constructs.dml  # noqa: F401
import querygen.constructs.dql  # noqa: F401

__all__ = [
    "ConstructRenderer",
    "RenderContext",
    "get_renderer",
    "register",
    "registered_token_types",
]
