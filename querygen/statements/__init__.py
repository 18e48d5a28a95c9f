"""Statement templates, assembly and batch generation."""

from querygen.statements.assembler import RenderedStatement, StatementAssembler
from querygen.statements.batch import GeneratedStatement, StatementBatch, StatementGenerator
from querygen.statements.template import (
    DEFAULT_SHAPES,
    FeatureStep,
    Keyword,
    Literal,
    StatementShape,
    StatementTemplate,
    build_template,
)

__all__ = [
    "DEFAULT_SHAPES",
    "FeatureStep",
    "GeneratedStatement",
    "Keyword",
    "Literal",
    "RenderedStatement",
    "StatementAssembler",
    "StatementBatch",
    "StatementGenerator",
    "StatementShape",
    "StatementTemplate",
    "build_template",
]
