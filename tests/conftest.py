"""Pytest configuration and fixtures."""

import numpy as np
import pytest

from querygen.config.settings import Settings
from querygen.data.table import Table
from querygen.data.types import DataType
from querygen.keywords.catalog import MappedKeywordCatalog
from querygen.keywords.loader import load_keyword_catalog
from querygen.keywords.models import DataTypeMapping, KeywordMapping


@pytest.fixture
def settings():
    """Provide settings fixture."""
    return Settings()


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(1234)


@pytest.fixture
def catalog(settings):
    """Catalog built from the bundled dialect config."""
    return load_keyword_catalog(settings=settings)


@pytest.fixture
def orders_table():
    """orders(id serial, total numeric, active bool) with 3 rows."""
    table = Table("orders", row_count=3)
    table.add_column("id", DataType.SERIAL)
    table.add_column("total", DataType.NUMERIC)
    table.add_column("active", DataType.BOOL)
    return table


@pytest.fixture
def events_table():
    """A table with a column of every data type."""
    table = Table("events", row_count=5)
    for data_type in DataType:
        table.add_column(f"c_{data_type.value}", data_type)
    return table


@pytest.fixture
def catalog_factory():
    """Build a small catalog: keyword -> (postgres, bigquery), all enabled unless given."""

    def _make(
        keywords: dict[str, tuple[str, str]],
        enabled: set[str] | None = None,
        data_types: dict[DataType, tuple[str, str]] | None = None,
    ) -> MappedKeywordCatalog:
        features = {
            name: [KeywordMapping(postgres=pg, bigquery=bq)] for name, (pg, bq) in keywords.items()
        }
        type_maps = [
            DataTypeMapping(data_type=dt, postgres=pg, bigquery=bq)
            for dt, (pg, bq) in (data_types or {}).items()
        ]
        return MappedKeywordCatalog(
            features=features,
            enabled=set(keywords) if enabled is None else enabled,
            data_types=type_maps,
        )

    return _make
