"""Tests for loading the dialect configuration files."""

import json
import shutil

import pytest

from querygen.config.settings import DEFAULT_CONFIG_DIR
from querygen.errors import CatalogConfigError, UnmappedKeywordError
from querygen.keywords.loader import (
    load_enabled_keywords,
    load_feature_mappings,
    load_keyword_catalog,
)


@pytest.fixture
def config_dir(tmp_path):
    """Writable copy of the bundled configuration."""
    target = tmp_path / "dialect_config"
    shutil.copytree(DEFAULT_CONFIG_DIR, target)
    return target


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")


class TestLoadBundledConfig:
    def test_loads_default_directory(self, settings):
        catalog = load_keyword_catalog(settings=settings)
        assert catalog.is_enabled("DQL_SELECT")
        assert not catalog.is_enabled("DDL_CLUSTER")

    def test_enabled_keywords(self):
        enabled = load_enabled_keywords(DEFAULT_CONFIG_DIR / "user_keywords.json")
        assert "DML_INSERT" in enabled
        assert "DDL_CLUSTER" not in enabled

    def test_token_specs_parsed(self, catalog):
        limit = catalog.variants("DQL_LIMIT")[0]
        assert limit.tokens[0].token_name.value == "count"
        assert limit.tokens[0].params == {"bound": 100}

    def test_optional_token(self, catalog):
        order_by = catalog.variants("DQL_ORDER_BY")[0]
        assert [spec.required for spec in order_by.tokens] == [True, False]


class TestLoadErrors:
    def test_missing_file(self, config_dir, settings):
        (config_dir / "dql_mapping.json").unlink()
        with pytest.raises(FileNotFoundError):
            load_keyword_catalog(config_dir, settings)

    def test_malformed_json(self, config_dir, settings):
        (config_dir / "user_keywords.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogConfigError):
            load_keyword_catalog(config_dir, settings)

    def test_unknown_token_name(self, config_dir):
        path = config_dir / "extra.json"
        _write(
            path,
            {
                "features": [
                    {
                        "feature": "DQL_QUALIFY",
                        "allMappings": [
                            {
                                "postgres": "QUALIFY",
                                "bigQuery": "QUALIFY",
                                "tokens": [{"tokenName": "no_such_token"}],
                            }
                        ],
                    }
                ]
            },
        )
        with pytest.raises(CatalogConfigError):
            load_feature_mappings([path])

    def test_duplicate_feature(self, config_dir):
        path = config_dir / "dql_mapping.json"
        with pytest.raises(CatalogConfigError):
            load_feature_mappings([path, path])

    def test_enabled_feature_without_mapping(self, config_dir, settings):
        _write(
            config_dir / "user_keywords.json",
            {"featureIndicators": [{"feature": "DQL_QUALIFY", "isIncluded": True}]},
        )
        with pytest.raises(UnmappedKeywordError):
            load_keyword_catalog(config_dir, settings)
