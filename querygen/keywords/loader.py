"""Load the keyword catalog from the JSON dialect configuration."""

import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from querygen.config.settings import Settings, get_settings
from querygen.errors import CatalogConfigError
from querygen.keywords.catalog import MappedKeywordCatalog
from querygen.keywords.models import DataTypeMaps, FeatureFile, FeatureIndicators, KeywordMapping

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _read_model(path: Path, model: type[M]) -> M:
    """Parse a JSON config file into a pydantic model."""
    if not path.exists():
        raise FileNotFoundError(f"Dialect config not found: {path}")
    try:
        return model.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        raise CatalogConfigError(f"Invalid dialect config {path.name}: {e}") from e


def load_enabled_keywords(path: Path) -> set[str]:
    """Features the user included."""
    indicators = _read_model(path, FeatureIndicators)
    return {ind.feature for ind in indicators.feature_indicators if ind.is_included}


def load_feature_mappings(paths: list[Path]) -> dict[str, list[KeywordMapping]]:
    """Variants of every feature across the ddl/dml/dql mapping files."""
    features: dict[str, list[KeywordMapping]] = {}
    for path in paths:
        for feature in _read_model(path, FeatureFile).features:
            if feature.feature in features:
                raise CatalogConfigError(
                    f"Feature '{feature.feature}' is defined more than once ({path.name})"
                )
            features[feature.feature] = list(feature.all_mappings)
    return features


def load_keyword_catalog(
    config_dir: Path | None = None,
    settings: Settings | None = None,
) -> MappedKeywordCatalog:
    """Build an immutable catalog from the configuration directory.

    Args:
        config_dir: Directory holding the JSON files. Defaults to settings.config_dir.
        settings: Settings naming the files. Defaults to the cached settings.

    Raises:
        FileNotFoundError: If a configuration file is missing.
        CatalogConfigError: If a file does not match its schema.
        UnmappedKeywordError: If an enabled keyword has no complete mapping.
    """
    settings = settings or get_settings()
    config_dir = Path(config_dir or settings.config_dir)

    enabled = load_enabled_keywords(config_dir / settings.keywords_file)
    features = load_feature_mappings([config_dir / name for name in settings.mapping_files])
    data_types = _read_model(config_dir / settings.datatype_file, DataTypeMaps).data_type_maps

    logger.info("Loaded dialect config from %s", config_dir)
    return MappedKeywordCatalog(features=features, enabled=enabled, data_types=data_types)
