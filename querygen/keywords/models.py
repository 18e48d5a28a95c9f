"""Pydantic models for the dialect configuration files."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from querygen.config.constants import Dialect, TokenType
from querygen.data.types import DataType


class _ConfigModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class TokenSpec(_ConfigModel):
    """A token that must (or may) follow a keyword variant."""

    token_name: TokenType
    required: bool = True
    count: int = Field(default=1, ge=0)
    params: dict[str, Any] = Field(default_factory=dict)


class DialectText(_ConfigModel):
    """Surface text for each supported dialect."""

    postgres: str = Field(min_length=1)
    bigquery: str = Field(alias="bigQuery", min_length=1)

    def for_dialect(self, dialect: Dialect) -> str:
        if dialect is Dialect.POSTGRES:
            return self.postgres
        if dialect is Dialect.BIGQUERY:
            return self.bigquery
        raise ValueError(f"Unsupported dialect: {dialect}")


class KeywordMapping(DialectText):
    """One variant of a feature: its lexemes and the tokens that follow."""

    tokens: list[TokenSpec] = Field(default_factory=list)


class Feature(_ConfigModel):
    """An abstract keyword with all its variants."""

    feature: str
    all_mappings: list[KeywordMapping] = Field(min_length=1)


class FeatureFile(_ConfigModel):
    """Contents of a ddl/dml/dql mapping file."""

    features: list[Feature]


class FeatureIndicator(_ConfigModel):
    """Whether the user included a feature."""

    feature: str
    is_included: bool


class FeatureIndicators(_ConfigModel):
    """Contents of the user keywords file."""

    feature_indicators: list[FeatureIndicator]


class DataTypeMapping(DialectText):
    """Per-dialect type keyword for a DataType."""

    data_type: DataType


class DataTypeMaps(_ConfigModel):
    """Contents of the datatype mapping file."""

    data_type_maps: list[DataTypeMapping]
