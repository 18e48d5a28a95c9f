"""Application settings using Pydantic BaseSettings."""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from querygen.config.constants import DEFAULT_COUNT_BOUND, DEFAULT_STRING_LENGTH

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "resources" / "dialect_config"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="QUERYGEN_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Template Query Generator"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @model_validator(mode="after")
    def validate_positive(self) -> "Settings":
        for field_name in (
            "statement_count",
            "random_string_length",
            "table_column_count",
            "max_workers",
        ):
            value = getattr(self, field_name)
            if value <= 0:
                raise ValueError(f"{field_name} must be positive, got {value}")
        return self

    @model_validator(mode="after")
    def validate_non_negative(self) -> "Settings":
        for field_name in ("table_row_count", "default_count_bound"):
            value = getattr(self, field_name)
            if value < 0:
                raise ValueError(f"{field_name} must be non-negative, got {value}")
        return self

    # Randomness
    random_seed: int | None = None

    # Dialect configuration
    config_dir: Path = DEFAULT_CONFIG_DIR
    keywords_file: str = "user_keywords.json"
    mapping_files: list[str] = ["ddl_mapping.json", "dml_mapping.json", "dql_mapping.json"]
    datatype_file: str = "datatype_mapping.json"

    # Output
    output_dir: Path = Path("outputs")

    # Generation
    statement_count: int = 10
    random_string_length: int = DEFAULT_STRING_LENGTH
    table_column_count: int = 6
    table_row_count: int = 10
    default_count_bound: int = DEFAULT_COUNT_BOUND

    # Batch
    max_workers: int = 1
    abort_on_error: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
