"""Keyword catalog and dialect configuration."""

from querygen.keywords.catalog import KeywordCatalog, MappedKeywordCatalog, resolve_enabled
from querygen.keywords.loader import load_keyword_catalog
from querygen.keywords.models import DataTypeMapping, KeywordMapping, TokenSpec

__all__ = [
    "DataTypeMapping",
    "KeywordCatalog",
    "KeywordMapping",
    "MappedKeywordCatalog",
    "TokenSpec",
    "load_keyword_catalog",
    "resolve_enabled",
]
